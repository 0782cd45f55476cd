import os
from dataclasses import dataclass, fields

from dotenv import load_dotenv


@dataclass(frozen=True)
class Credentials:
    """Static business credentials issued on the Daraja developer portal"""
    consumer_key: str
    consumer_secret: str
    business_shortcode: str
    passkey: str

    @classmethod
    def from_env(cls) -> 'Credentials':
        """Build credentials from the MPESA_* environment variables, loading .env first"""
        load_dotenv()
        return cls(
            consumer_key=os.getenv('MPESA_CONSUMER_KEY', ''),
            consumer_secret=os.getenv('MPESA_CONSUMER_SECRET', ''),
            business_shortcode=os.getenv('MPESA_SHORTCODE', ''),
            passkey=os.getenv('MPESA_PASSKEY', ''),
        )

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def __repr__(self):
        # Secrets stay out of tracebacks and log lines
        return f"Credentials(consumer_key='***', consumer_secret='***', business_shortcode={self.business_shortcode!r}, passkey='***')"
