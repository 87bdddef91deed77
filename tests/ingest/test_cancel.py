from roster_browser.ingest.cancel import CancelToken


class TestCancelToken:
    def test_starts_live(self) -> None:
        assert not CancelToken().cancelled

    def test_cancel_is_sticky(self) -> None:
        token = CancelToken()
        token.cancel()
        token.cancel()
        assert token.cancelled

    def test_tokens_are_independent(self) -> None:
        first, second = CancelToken(), CancelToken()
        first.cancel()
        assert not second.cancelled
