from .api_client import ApiClientError, LinguaLogClient
from .review_session import FlashcardReview

__all__ = ["ApiClientError", "LinguaLogClient", "FlashcardReview"]
