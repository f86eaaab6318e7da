from __future__ import annotations

from modelsync.engine.cancellation import CancellationToken


def test_token_cancel_and_reset() -> None:
    token = CancellationToken()
    assert not token.cancelled

    token.cancel()
    token.cancel()
    assert token.cancelled

    token.reset()
    assert not token.cancelled
