import pytest

from codeguardian.core.signature import compute_signature, verify_signature
from codeguardian.exceptions import WebhookSignatureError
from codeguardian.tests.unit.helpers import generate_signature, pull_request_payload

SECRET = "s3cr3t"


@pytest.mark.parametrize(
    "payload",
    [b"", b"{}", pull_request_payload(), "héllo wörld".encode("utf-8")],
)
def test_valid_signature_is_accepted(payload):
    verify_signature(payload, generate_signature(payload, SECRET), SECRET)


def test_compute_signature_matches_github_format():
    payload = pull_request_payload()
    assert compute_signature(payload, SECRET) == generate_signature(payload, SECRET)
    assert compute_signature(payload, SECRET).startswith("sha256=")


def test_signature_of_other_payload_is_rejected():
    payload = pull_request_payload(action="opened")
    other = pull_request_payload(action="reopened")

    with pytest.raises(WebhookSignatureError) as excinfo:
        verify_signature(payload, generate_signature(other, SECRET), SECRET)

    assert excinfo.value.message == "Invalid signature"


def test_tampering_with_any_single_byte_is_detected():
    payload = pull_request_payload()
    signature = generate_signature(payload, SECRET)

    for index in range(0, len(payload), 7):
        tampered = bytearray(payload)
        tampered[index] ^= 0x01
        with pytest.raises(WebhookSignatureError):
            verify_signature(bytes(tampered), signature, SECRET)


def test_reencoded_body_does_not_verify():
    payload = b'{"action": "opened", "number": 1}'
    signature = generate_signature(payload, SECRET)

    with pytest.raises(WebhookSignatureError):
        verify_signature(b'{"action":"opened","number":1}', signature, SECRET)


def test_wrong_secret_is_rejected():
    payload = pull_request_payload()

    with pytest.raises(WebhookSignatureError):
        verify_signature(payload, generate_signature(payload, "other"), SECRET)


@pytest.mark.parametrize("signature", [None, ""])
def test_missing_signature_is_rejected(signature):
    with pytest.raises(WebhookSignatureError) as excinfo:
        verify_signature(b"{}", signature, SECRET)

    assert excinfo.value.message == "No signature found"


@pytest.mark.parametrize(
    "signature", ["sha256=invalid_signature", "sha1=abc", "not-a-signature", "sha256="]
)
def test_malformed_signature_is_rejected(signature):
    with pytest.raises(WebhookSignatureError) as excinfo:
        verify_signature(b"{}", signature, SECRET)

    assert excinfo.value.message == "Invalid signature"
