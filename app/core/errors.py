from fastapi import HTTPException


class ValidationError(HTTPException):
    def __init__(self, detail: str = "Validations fails"):
        super().__init__(status_code=400, detail=detail)


class NotFound(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=400, detail=detail)


class AlreadyCanceled(HTTPException):
    def __init__(self, detail: str = "This meetapp was already canceled!"):
        super().__init__(status_code=400, detail=detail)


class Unauthorized(HTTPException):
    def __init__(self, detail: str = "User does not autorised"):
        super().__init__(status_code=401, detail=detail)


class TooLate(HTTPException):
    def __init__(self, detail: str = "You can only cancel appointments 3 days in advance."):
        super().__init__(status_code=401, detail=detail)


class Unauthenticated(HTTPException):
    def __init__(self, detail: str = "Token not provided"):
        super().__init__(status_code=401, detail=detail)


class InvalidToken(HTTPException):
    def __init__(self, detail: str = "Token invalid"):
        super().__init__(status_code=401, detail=detail)
