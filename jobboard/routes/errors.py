from fastapi import HTTPException, status

from jobboard.exceptions import (
    DuplicateApplicationError,
    JobBoardError,
    NotFoundError,
    UnauthorizedError,
)


def to_http_exception(error: JobBoardError) -> HTTPException:
    """Map a crud-layer error to the HTTP response the client sees"""
    if isinstance(error, UnauthorizedError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(error))
    if isinstance(error, DuplicateApplicationError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
