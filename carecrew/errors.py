class LedgerError(Exception):
    """A business-rule rejection, rendered as {"error": message}."""

    status_code = 409
    message = "Request rejected"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class AlreadyRequested(LedgerError):
    message = "Already Requested!"


class NoVolunteersNeeded(LedgerError):
    message = "No Volunteers Needed!"
