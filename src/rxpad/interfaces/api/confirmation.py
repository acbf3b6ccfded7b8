"""Request-scoped confirmation - ``?confirm=true`` answers the store's prompt."""

import falcon.asgi

# Same spellings falcon accepts in Request.get_param_as_bool.
_TRUE_STRINGS = frozenset(("true", "True", "t", "yes", "y", "1", "on"))
_FALSE_STRINGS = frozenset(("false", "False", "f", "no", "n", "0", "off"))


def parse_confirm(value: object) -> bool:
    """JSON ``confirm`` value as a bool. Raises ValueError for anything else."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        if value in _TRUE_STRINGS:
            return True
        if value in _FALSE_STRINGS:
            return False
    raise ValueError(f"confirm must be a boolean, got {value!r}")


class RequestConfirmation:
    """Confirmation callable answering from the request.

    Records whether the store asked, so a resource can tell a declined
    confirmation from an operation that never needed one.
    """

    def __init__(self, answer: bool) -> None:
        self._answer = answer
        self.asked = False

    @classmethod
    def from_request(cls, req: falcon.asgi.Request, body: dict | None = None) -> "RequestConfirmation":
        """Read ``confirm`` from the JSON body, else the query string.

        Raises ValueError when the body value is not a recognizable boolean.
        """
        if body is not None and "confirm" in body:
            return cls(parse_confirm(body["confirm"]))
        return cls(bool(req.get_param_as_bool("confirm")))

    def __call__(self) -> bool:
        self.asked = True
        return self._answer

    @property
    def declined(self) -> bool:
        return self.asked and not self._answer


def declined_response(resp, action: str) -> None:
    """409 for a declined destructive action."""
    resp.status = falcon.HTTP_409
    resp.media = {"status": "declined", "action": action}
