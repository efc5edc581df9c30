import json
import unittest
from unittest import mock

import requests

from game import ScoreSubmission, parse_submission, submit_score

PNG = "data:image/png;base64,iVBORw0KGgo="


class TestSubmit(unittest.TestCase):
    def test_given_valid_form_when_parsing_then_trimmed_submission(self):
        sub = parse_submission({"name": "  " + "n" * 60 + "  ", "score": "42", "image": PNG})
        self.assertEqual(sub.name, "n" * 40)
        self.assertEqual(sub.score, 42)
        self.assertEqual(sub.image, PNG)
        self.assertEqual(sub.to_payload(), {"name": "n" * 40, "score": 42, "image": PNG})

    def test_given_bad_form_when_parsing_then_value_error(self):
        bad = [
            None,
            [],
            {"name": "", "score": 1, "image": PNG},
            {"name": "a", "score": "x", "image": PNG},
            {"name": "a", "score": -3, "image": PNG},
            {"name": "a", "score": 3, "image": "http://example.com/a.png"},
            {"name": "a", "score": 3},
        ]
        for obj in bad:
            with self.assertRaises(ValueError):
                parse_submission(obj)

    def test_given_endpoint_ok_when_submitting_then_json_body_posted(self):
        resp = mock.Mock()
        resp.text = "saved"
        resp.raise_for_status.return_value = None
        sub = ScoreSubmission(name="ann", score=16, image=PNG)
        with mock.patch("samegame_core.submit.requests.post", return_value=resp) as post:
            result = submit_score("https://scores.example/exec", sub, timeout=3)
        self.assertTrue(result.ok)
        self.assertEqual(result.body, "saved")
        args, kwargs = post.call_args
        self.assertEqual(args[0], "https://scores.example/exec")
        self.assertEqual(json.loads(kwargs["data"]), {"name": "ann", "score": 16, "image": PNG})
        self.assertEqual(kwargs["timeout"], 3)

    def test_given_network_error_when_submitting_then_failure_reported_not_raised(self):
        sub = ScoreSubmission(name="ann", score=16, image=PNG)
        with mock.patch("samegame_core.submit.requests.post", side_effect=requests.ConnectionError("down")):
            result = submit_score("https://scores.example/exec", sub)
        self.assertFalse(result.ok)
        self.assertIn("down", result.error)

    def test_given_http_error_status_when_submitting_then_failure_reported(self):
        resp = mock.Mock()
        resp.raise_for_status.side_effect = requests.HTTPError("500 Server Error")
        sub = ScoreSubmission(name="ann", score=16, image=PNG)
        with mock.patch("samegame_core.submit.requests.post", return_value=resp):
            result = submit_score("https://scores.example/exec", sub)
        self.assertFalse(result.ok)
        self.assertIn("500", result.error)


if __name__ == "__main__":
    unittest.main(verbosity=2)
