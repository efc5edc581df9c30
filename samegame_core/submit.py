from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from .config import debug_enabled

MAX_NAME_LENGTH = 40
IMAGE_PREFIX = 'data:image/'


@dataclass(frozen=True)
class ScoreSubmission:
    """Name, final score and drawing (as a data URL) sent to the score collection endpoint."""
    name: str
    score: int
    image: str

    def to_payload(self) -> Dict[str, Any]:
        return {"name": self.name, "score": self.score, "image": self.image}


@dataclass(frozen=True)
class SubmitResult:
    ok: bool
    body: Optional[str] = None
    error: Optional[str] = None


def parse_submission(obj: Any) -> ScoreSubmission:
    """Validates a JSON object from the browser form. Raises ValueError with a user-facing reason."""
    if not isinstance(obj, dict):
        raise ValueError('expected a JSON object')
    name = str(obj.get('name') or '').strip()
    if not name:
        raise ValueError('name required')
    name = name[:MAX_NAME_LENGTH]
    try:
        score = int(obj.get('score'))
    except (TypeError, ValueError):
        raise ValueError('score must be an integer') from None
    if score < 0:
        raise ValueError('score must be non-negative')
    image = obj.get('image')
    if not isinstance(image, str) or not image.startswith(IMAGE_PREFIX):
        raise ValueError('image must be a data:image/ URL')
    return ScoreSubmission(name=name, score=score, image=image)


def submit_score(url: str, submission: ScoreSubmission, timeout: float = 10.0) -> SubmitResult:
    """
    POSTs the submission as a JSON body to the collection endpoint.
    Network errors and non-2xx replies come back as SubmitResult(ok=False); nothing is raised.
    """
    if debug_enabled():
        print(f"[submit] posting score={submission.score} name={submission.name!r} to {url}")
    try:
        resp = requests.post(url, data=json.dumps(submission.to_payload()), timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        if debug_enabled():
            print(f"[submit] failed: {e}")
        return SubmitResult(ok=False, error=str(e))
    return SubmitResult(ok=True, body=resp.text)
