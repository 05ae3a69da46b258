from dataclasses import dataclass
from datetime import datetime, UTC


@dataclass(frozen=True)
class ShortURLModel:
    """Represent a short-lived URL mapping.

    Instances are immutable snapshots. The data store replaces its stored
    instance whenever the hit counter changes, so a model handed out to a
    caller never changes underneath it.

    Attributes:
        target (str):
            The original long URL that the short code redirects to.
        shortcode (str):
            The unique, case-sensitive short identifier of the mapping.
        created_at (datetime):
            UTC moment the mapping was stored.
        expires_at (datetime):
            UTC moment after which the mapping is no longer valid.
        hits (int):
            Number of successful resolutions (redirects) so far.

    Example:
        >>> from datetime import datetime, timedelta, UTC
        >>> now = datetime.now(UTC)
        >>> url = ShortURLModel(
        ...     target="https://example.com/article/123",
        ...     shortcode="abc123",
        ...     created_at=now,
        ...     expires_at=now + timedelta(minutes=30),
        ... )
        >>> url.hits
        0
        >>> url.expired()
        False
    """

    target: str
    shortcode: str
    created_at: datetime
    expires_at: datetime
    hits: int = 0

    def expired(self, now: datetime | None = None) -> bool:
        """Return True iff `now` is strictly past `expires_at`.

        Args:
            now (datetime | None):
                Moment to evaluate against. Defaults to the current UTC time.

        Returns:
            bool: True if the mapping has expired, False otherwise.
        """
        if now is None:
            now = datetime.now(UTC)
        return now > self.expires_at
