"""Unit tests for the ShortURLMemoryDAO

Test coverage includes:

1. Initialization and configuration
   - Ensures an empty store with default or custom settings.
   - Confirms invalid shortcode lengths and attempt bounds raise ValueError.

2. Creation behavior
   - Validates storing records under requested or generated shortcodes.
   - Ensures expiry is computed from the validity period.
   - Confirms invalid arguments raise the matching InvalidInputError, in order.
   - Confirms live duplicate shortcodes raise ShortURLAlreadyExistsError.
   - Confirms shortcodes held by expired records can be reclaimed.
   - Confirms generation gives up with ShortcodeGenerationError.

3. Retrieval behavior
   - Ensures get() returns a snapshot and never counts a hit.
   - Confirms unknown shortcodes raise ShortURLNotFoundError.
   - Confirms expired records raise ShortURLExpiredError once, then are gone.
   - Ensures invalid parameter types raise BeartypeCallHintParamViolation.

4. Hit counter operations
   - Ensures hit() returns the target and counts every resolution.
   - Confirms expired and unknown shortcodes are never counted.

5. Sweeping and counting
   - Ensures sweep() evicts exactly the expired records.
   - Confirms count() includes expired-but-unswept records.
"""

from datetime import timedelta

import pytest
from beartype.roar import BeartypeCallHintParamViolation
from freezegun import freeze_time

from ttlshortener.models import ShortURLModel
from ttlshortener.dao.memory import ShortURLMemoryDAO
from ttlshortener.dao.exceptions import (
    DAOError,
    InvalidInputError,
    InvalidShortcodeError,
    InvalidURLError,
    InvalidValidityError,
    ShortcodeGenerationError,
    ShortURLAlreadyExistsError,
    ShortURLExpiredError,
    ShortURLNotFoundError,
)


TARGET = 'https://example.com/article/123'


# -------------------------------
# 1. Initialization and configuration
# -------------------------------


def test_init_defaults(dao):
    assert dao.shortcode_length == 6
    assert dao.max_attempts == 10
    assert dao.count() == 0


def test_init_custom_settings():
    dao = ShortURLMemoryDAO(shortcode_length=12, max_attempts=3)
    assert dao.shortcode_length == 12
    assert dao.max_attempts == 3


@pytest.mark.parametrize('length', [0, 2, 21])
def test_init_invalid_shortcode_length(length):
    with pytest.raises(ValueError, match='Shortcode length'):
        ShortURLMemoryDAO(shortcode_length=length)


@pytest.mark.parametrize('attempts', [0, -3])
def test_init_invalid_max_attempts(attempts):
    with pytest.raises(ValueError, match='Max attempts'):
        ShortURLMemoryDAO(max_attempts=attempts)


def test_init_invalid_types():
    with pytest.raises(BeartypeCallHintParamViolation):
        ShortURLMemoryDAO(shortcode_length='6')


def test_stores_are_independent():
    first, second = ShortURLMemoryDAO(), ShortURLMemoryDAO()
    first.create(TARGET, shortcode='abc')
    assert second.count() == 0


# -------------------------------
# 2. Creation behavior
# -------------------------------


def test_create_with_requested_shortcode(dao, now):
    with freeze_time(now):
        short_url = dao.create(TARGET, validity=30, shortcode='abc123')

    assert short_url == ShortURLModel(
        target=TARGET,
        shortcode='abc123',
        created_at=now,
        expires_at=now + timedelta(minutes=30),
        hits=0,
    )
    assert dao.count() == 1


def test_create_uses_default_validity(dao, now):
    with freeze_time(now):
        short_url = dao.create(TARGET)
    assert short_url.expires_at - short_url.created_at == timedelta(minutes=30)


def test_create_generates_shortcode(dao):
    short_url = dao.create(TARGET)
    assert len(short_url.shortcode) == 6
    assert short_url.shortcode.isalnum()
    assert dao.get(short_url.shortcode) == short_url


def test_create_generates_configured_length():
    dao = ShortURLMemoryDAO(shortcode_length=10)
    assert len(dao.create(TARGET).shortcode) == 10


def test_create_stores_target_verbatim(dao):
    target = 'HTTPS://Example.com/Path/?q=A%20B#Frag'
    dao.create(target, shortcode='verbatim')
    assert dao.get('verbatim').target == target


def test_create_generated_shortcodes_are_distinct(dao):
    codes = {dao.create(TARGET).shortcode for _ in range(200)}
    assert len(codes) == 200
    assert dao.count() == 200


@pytest.mark.parametrize('target', ['not-a-url', '', 'ftp://example.com', 'example.com', None, 42])
def test_create_invalid_url(dao, target):
    with pytest.raises(InvalidURLError):
        dao.create(target, shortcode='abc')
    assert dao.count() == 0


@pytest.mark.parametrize('validity', [0, -1, 1.5, '30', None, True])
def test_create_invalid_validity(dao, validity):
    with pytest.raises(InvalidValidityError):
        dao.create(TARGET, validity=validity)
    assert dao.count() == 0


def test_create_unrepresentable_validity(dao):
    """Validity so large the expiry overflows datetime is an invalid validity."""
    with pytest.raises(InvalidValidityError):
        dao.create(TARGET, validity=10**15)


@pytest.mark.parametrize('shortcode', ['ab', 'x' * 21, 'my-link', 'with space', 'ünï', 123])
def test_create_invalid_shortcode(dao, shortcode):
    with pytest.raises(InvalidShortcodeError):
        dao.create(TARGET, shortcode=shortcode)
    assert dao.count() == 0


def test_create_validates_url_before_validity_and_shortcode(dao):
    with pytest.raises(InvalidURLError):
        dao.create('not-a-url', validity=0, shortcode='ab')


def test_create_validates_validity_before_shortcode(dao):
    with pytest.raises(InvalidValidityError):
        dao.create(TARGET, validity=0, shortcode='ab')


def test_invalid_input_errors_share_a_base():
    for error in (InvalidURLError, InvalidValidityError, InvalidShortcodeError):
        assert issubclass(error, InvalidInputError)
        assert issubclass(error, DAOError)


def test_create_duplicate_shortcode(dao):
    dao.create(TARGET, shortcode='abc')
    with pytest.raises(ShortURLAlreadyExistsError):
        dao.create('https://example.com/other', shortcode='abc')

    # The original record is untouched
    assert dao.get('abc').target == TARGET
    assert dao.count() == 1


def test_create_shortcodes_are_case_sensitive(dao):
    dao.create(TARGET, shortcode='abc')
    dao.create('https://example.com/other', shortcode='ABC')
    assert dao.get('abc').target == TARGET
    assert dao.get('ABC').target == 'https://example.com/other'


def test_create_reclaims_expired_shortcode(dao, now):
    with freeze_time(now) as frozen:
        dao.create(TARGET, validity=1, shortcode='abc')
        dao.hit('abc')
        frozen.tick(timedelta(minutes=2))

        short_url = dao.create('https://example.com/other', validity=5, shortcode='abc')

    assert short_url.target == 'https://example.com/other'
    assert short_url.hits == 0
    assert dao.count() == 1


def test_create_generation_exhausted(monkeypatch):
    dao = ShortURLMemoryDAO(max_attempts=3)
    dao.create(TARGET, shortcode='taken1')

    calls = []

    def always_taken(length):
        calls.append(length)
        return 'taken1'

    monkeypatch.setattr('ttlshortener.dao.memory.short_url_memory_dao.generate_shortcode', always_taken)

    with pytest.raises(ShortcodeGenerationError):
        dao.create(TARGET)
    assert calls == [6, 6, 6]
    assert dao.count() == 1


def test_create_generation_retries_on_collision(monkeypatch):
    dao = ShortURLMemoryDAO()
    dao.create(TARGET, shortcode='taken1')

    candidates = iter(['taken1', 'taken1', 'free01'])
    monkeypatch.setattr(
        'ttlshortener.dao.memory.short_url_memory_dao.generate_shortcode',
        lambda length: next(candidates),
    )

    assert dao.create(TARGET).shortcode == 'free01'


# -------------------------------
# 3. Retrieval behavior
# -------------------------------


def test_get_returns_snapshot(dao):
    created = dao.create(TARGET, shortcode='abc')
    assert dao.get('abc') == created


def test_get_does_not_count_hits(dao):
    dao.create(TARGET, shortcode='abc')
    for _ in range(5):
        dao.get('abc')
    assert dao.get('abc').hits == 0


def test_get_snapshot_is_not_updated_by_later_hits(dao):
    dao.create(TARGET, shortcode='abc')
    snapshot = dao.get('abc')
    dao.hit('abc')
    assert snapshot.hits == 0
    assert dao.get('abc').hits == 1


def test_get_not_found(dao):
    with pytest.raises(ShortURLNotFoundError):
        dao.get('missing')


def test_get_live_at_exact_expiry(dao, now):
    with freeze_time(now) as frozen:
        dao.create(TARGET, validity=1, shortcode='abc')
        frozen.tick(timedelta(minutes=1))
        assert dao.get('abc').target == TARGET


def test_get_expired_then_not_found(dao, now):
    with freeze_time(now) as frozen:
        dao.create(TARGET, validity=1, shortcode='abc')
        frozen.tick(timedelta(minutes=1, seconds=1))

        with pytest.raises(ShortURLExpiredError):
            dao.get('abc')
        with pytest.raises(ShortURLNotFoundError):
            dao.get('abc')
    assert dao.count() == 0


@pytest.mark.parametrize('shortcode', [None, 123, b'abc'])
def test_get_invalid_types(dao, shortcode):
    with pytest.raises(BeartypeCallHintParamViolation):
        dao.get(shortcode)


# -------------------------------
# 4. Hit counter operations
# -------------------------------


def test_hit_returns_target_and_counts(dao):
    dao.create(TARGET, shortcode='abc')
    assert dao.hit('abc') == TARGET
    assert dao.get('abc').hits == 1


@pytest.mark.parametrize('hits', [2, 10, 57])
def test_hit_counts_every_resolution(dao, hits):
    dao.create(TARGET, shortcode='abc')
    for _ in range(hits):
        dao.hit('abc')
    assert dao.get('abc').hits == hits


def test_hit_counts_per_shortcode(dao):
    dao.create(TARGET, shortcode='abc')
    dao.create(TARGET, shortcode='xyz')
    dao.hit('abc')
    dao.hit('abc')
    dao.hit('xyz')
    assert dao.get('abc').hits == 2
    assert dao.get('xyz').hits == 1


def test_hit_not_found(dao):
    with pytest.raises(ShortURLNotFoundError):
        dao.hit('missing')


def test_hit_expired_then_not_found(dao, now):
    with freeze_time(now) as frozen:
        dao.create(TARGET, validity=1, shortcode='abc')
        dao.hit('abc')
        frozen.tick(timedelta(minutes=2))

        with pytest.raises(ShortURLExpiredError):
            dao.hit('abc')
        with pytest.raises(ShortURLNotFoundError):
            dao.hit('abc')
    assert dao.count() == 0


@pytest.mark.parametrize('shortcode', [None, 123, ['abc']])
def test_hit_invalid_types(dao, shortcode):
    with pytest.raises(BeartypeCallHintParamViolation):
        dao.hit(shortcode)


# -------------------------------
# 5. Sweeping and counting
# -------------------------------


def test_sweep_empty_store(dao):
    assert dao.sweep() == 0


def test_sweep_evicts_only_expired(dao, now):
    with freeze_time(now) as frozen:
        dao.create(TARGET, validity=1, shortcode='short1')
        dao.create(TARGET, validity=1, shortcode='short2')
        dao.create(TARGET, validity=60, shortcode='long01')
        frozen.tick(timedelta(minutes=5))

        assert dao.count() == 3
        assert dao.sweep() == 2
        assert dao.count() == 1
        assert dao.sweep() == 0

        assert dao.get('long01').target == TARGET
        with pytest.raises(ShortURLNotFoundError):
            dao.get('short1')


def test_sweep_keeps_records_at_exact_expiry(dao, now):
    with freeze_time(now) as frozen:
        dao.create(TARGET, validity=1, shortcode='abc')
        frozen.tick(timedelta(minutes=1))
        assert dao.sweep() == 0


def test_sweep_preserves_hits_of_live_records(dao, now):
    with freeze_time(now) as frozen:
        dao.create(TARGET, validity=60, shortcode='abc')
        dao.hit('abc')
        frozen.tick(timedelta(minutes=30))
        dao.sweep()
        assert dao.get('abc').hits == 1


def test_count_includes_expired_but_unswept(dao, now):
    with freeze_time(now) as frozen:
        dao.create(TARGET, validity=1, shortcode='abc')
        frozen.tick(timedelta(minutes=2))
        assert dao.count() == 1
        dao.sweep()
        assert dao.count() == 0


def test_healthcheck(dao):
    assert dao.healthcheck() is True
