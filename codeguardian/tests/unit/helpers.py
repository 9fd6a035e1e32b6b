import hashlib
import hmac
import json
import os

REPO_FULL_NAME = "octocat/hello-world"
PLAIN_ACCESS_TOKEN = "gho_plaintext_token"


def generate_signature(payload: bytes, secret: str = None) -> str:
    secret = secret if secret is not None else os.environ["WEBHOOK_SECRET"]
    hash_payload = hmac.new(secret.encode(), payload, hashlib.sha256)
    return f"sha256={hash_payload.hexdigest()}"


def pull_request_payload(action="opened", number=42, title="Add greeting endpoint"):
    """Encode a trimmed-down GitHub pull_request delivery body."""
    return json.dumps(
        {
            "action": action,
            "number": number,
            "pull_request": {
                "number": number,
                "title": title,
                "html_url": f"https://github.com/{REPO_FULL_NAME}/pull/{number}",
                "diff_url": f"https://github.com/{REPO_FULL_NAME}/pull/{number}.diff",
                "draft": False,
            },
            "repository": {"id": 1296269, "full_name": REPO_FULL_NAME},
            "sender": {"login": "octocat"},
        }
    ).encode()
