from .config import ConfigError
from .models import VerificationResult
from .passwords import generate
from .strength import verify

__all__ = ["ConfigError", "VerificationResult", "generate", "verify"]
