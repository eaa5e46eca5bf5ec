# terraweave/errors.py
# Every error carries its HTTP status; main.py renders them as {"error": message}.


class TerraWeaveError(Exception):
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(TerraWeaveError):
    status_code = 400


class AuthError(TerraWeaveError):
    status_code = 401


class StoreError(TerraWeaveError):
    status_code = 500
