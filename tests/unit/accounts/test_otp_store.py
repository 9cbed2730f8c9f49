"""Unit tests for OtpStore (backed by the locmem cache)."""

from __future__ import annotations

from datetime import timedelta

import pytest
from freezegun import freeze_time

from modules.accounts.exceptions import InvalidOtp
from modules.accounts.otp import (
    PURPOSE_REGISTER,
    PURPOSE_RESET,
    OtpStore,
    generate_otp,
)

pytestmark = pytest.mark.unit

EMAIL = "jane@example.com"


@pytest.fixture()
def store():
    return OtpStore(ttl=timedelta(minutes=10), max_attempts=3)


def wrong(code: str) -> str:
    return "000000" if code != "000000" else "111111"


def test_generate_otp_is_six_digits():
    for _ in range(20):
        code = generate_otp()
        assert len(code) == 6
        assert code.isdigit()


def test_consume_returns_payload(store):
    code = store.issue(PURPOSE_REGISTER, EMAIL, payload={"name": "Jane"})

    assert store.consume(PURPOSE_REGISTER, EMAIL, code) == {"name": "Jane"}


def test_code_is_single_use(store):
    code = store.issue(PURPOSE_REGISTER, EMAIL)
    store.consume(PURPOSE_REGISTER, EMAIL, code)

    with pytest.raises(InvalidOtp):
        store.consume(PURPOSE_REGISTER, EMAIL, code)


def test_reissue_replaces_previous_code(store):
    first = store.issue(PURPOSE_REGISTER, EMAIL)
    second = store.issue(PURPOSE_REGISTER, EMAIL)

    if first != second:
        with pytest.raises(InvalidOtp):
            store.consume(PURPOSE_REGISTER, EMAIL, first)
    assert store.consume(PURPOSE_REGISTER, EMAIL, second) == {}


def test_purposes_are_isolated(store):
    code = store.issue(PURPOSE_REGISTER, EMAIL)

    with pytest.raises(InvalidOtp):
        store.consume(PURPOSE_RESET, EMAIL, code)

    assert store.consume(PURPOSE_REGISTER, EMAIL, code) == {}


def test_missing_entry(store):
    with pytest.raises(InvalidOtp, match="Invalid or expired OTP"):
        store.consume(PURPOSE_RESET, EMAIL, "123456")


def test_expired_code_is_rejected(store):
    with freeze_time("2025-03-01 12:00:00") as frozen:
        code = store.issue(PURPOSE_REGISTER, EMAIL)
        frozen.tick(timedelta(minutes=11))

        with pytest.raises(InvalidOtp):
            store.consume(PURPOSE_REGISTER, EMAIL, code)


def test_code_valid_until_expiry(store):
    with freeze_time("2025-03-01 12:00:00") as frozen:
        code = store.issue(PURPOSE_REGISTER, EMAIL)
        frozen.tick(timedelta(minutes=9))

        assert store.consume(PURPOSE_REGISTER, EMAIL, code) == {}


def test_mismatch_keeps_entry_until_attempts_run_out(store):
    code = store.issue(PURPOSE_REGISTER, EMAIL)

    with pytest.raises(InvalidOtp):
        store.consume(PURPOSE_REGISTER, EMAIL, wrong(code))

    assert store.consume(PURPOSE_REGISTER, EMAIL, code) == {}


def test_too_many_attempts_burns_the_code(store):
    code = store.issue(PURPOSE_REGISTER, EMAIL)

    for _ in range(3):
        with pytest.raises(InvalidOtp):
            store.consume(PURPOSE_REGISTER, EMAIL, wrong(code))

    with pytest.raises(InvalidOtp):
        store.consume(PURPOSE_REGISTER, EMAIL, code)


def test_discard(store):
    code = store.issue(PURPOSE_RESET, EMAIL)
    store.discard(PURPOSE_RESET, EMAIL)

    with pytest.raises(InvalidOtp):
        store.consume(PURPOSE_RESET, EMAIL, code)
