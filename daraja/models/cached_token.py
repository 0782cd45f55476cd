from dataclasses import dataclass


@dataclass(frozen=True)
class CachedToken:
    value: str
    expires_at: float

    def is_valid(self, now: float) -> bool:
        """True while the expiry instant is strictly in the future"""
        return bool(self.value) and self.expires_at > now
