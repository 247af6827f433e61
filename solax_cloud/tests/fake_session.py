# tests/fake_session.py

import json


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None, reason="OK"):
        self.status_code = status_code
        self.reason = reason
        self._payload = payload
        self._text = text

    def json(self):
        if self._text is not None:
            return json.loads(self._text)
        return self._payload


class FakeSession:
    """
    Stand-in for requests.Session.
    `responder` is either a FakeResponse, an exception to raise, or a callable(url).
    """

    def __init__(self, responder):
        self.responder = responder
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        responder = self.responder
        if callable(responder):
            responder = responder(url)
        if isinstance(responder, Exception):
            raise responder
        return responder
