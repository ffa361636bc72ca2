import logging
from dataclasses import dataclass
from typing import Optional

import requests

from passgen.config import Settings
from passgen.errors import EnhancementError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnhancementResult:
    enhanced_password: str
    strength_score: float  # 0..1, as reported by the service
    explanation: str


class EnhancementClient:
    """
    Client for the remote password-enhancement flow.
    We send the password and get back a suggested stronger one, a 0..1 score
    and an explanation. The reply is passed through as-is, only its shape is checked.
    """

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        self.settings = settings or Settings()
        self.session = session or requests.Session()

    def enhance(self, password: str) -> EnhancementResult:
        if not password:
            raise EnhancementError("Please enter a password to enhance.")

        try:
            resp = self.session.post(
                self.settings.enhance_url,
                json={"password": password},
                timeout=self.settings.enhance_timeout,
            )
            resp.raise_for_status()
        except requests.RequestException as e:
            logger.warning("enhancement request failed: %s", e.__class__.__name__)
            raise EnhancementError(f"Could not enhance password: {e}") from e

        logger.info("enhancement service answered %s", resp.status_code)

        try:
            data = resp.json()
        except ValueError as e:
            raise EnhancementError("Enhancement service returned invalid JSON") from e

        return _parse_result(data)

    def close(self):
        self.session.close()


def _parse_result(data) -> EnhancementResult:
    if not isinstance(data, dict):
        raise EnhancementError("Enhancement service returned an unexpected payload")

    # some deployments wrap the flow output as {"result": {...}}
    if "result" in data and isinstance(data["result"], dict):
        data = data["result"]

    enhanced = data.get("enhancedPassword")
    score = data.get("strengthScore")
    explanation = data.get("explanation")

    if not isinstance(enhanced, str):
        raise EnhancementError("Missing 'enhancedPassword' in enhancement reply")
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        raise EnhancementError("Missing 'strengthScore' in enhancement reply")
    if not isinstance(explanation, str):
        raise EnhancementError("Missing 'explanation' in enhancement reply")

    return EnhancementResult(
        enhanced_password=enhanced,
        strength_score=float(score),
        explanation=explanation,
    )
