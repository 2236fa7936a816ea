"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for common error patterns.
Each business failure is its own class so callers can catch it precisely,
while FastAPI still renders it as a 4xx ``{"detail": ...}`` response.

Usage:
    from app.utils.exceptions import NotFoundError, OutOfStockError
    raise NotFoundError("Order not found")
    raise OutOfStockError("need more stock")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when a requested resource (member, item, order) does not exist.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외 — 중복 리소스 생성 시도 시 사용.

    409 Conflict exception.
    Raised when attempting to create a resource that violates a uniqueness rule
    (e.g. joining with a member name that is already taken).

    Args:
        detail: 오류 메시지 (Error message, default: "Resource already exists")
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class OutOfStockError(HTTPException):
    """409 Conflict 예외 — 재고 부족 시 사용.

    409 Conflict exception raised when an order asks for more units than
    the item currently has in stock. Raised before the stock is touched.

    Args:
        detail: 오류 메시지 (Error message, default: "need more stock")
    """

    def __init__(self, detail: str = "need more stock") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class ConflictError(HTTPException):
    """409 Conflict 예외 — 동시 수정 충돌 시 사용.

    409 Conflict exception raised when an explicit ``update(entity)`` loses
    the optimistic version check because another transaction changed the row.

    Args:
        detail: 오류 메시지 (Error message, default: "Concurrent modification")
    """

    def __init__(self, detail: str = "Concurrent modification") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when the request is valid data but an invalid state transition
    (e.g. cancelling an order that is already canceled or delivered).

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
