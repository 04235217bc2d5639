"""Translate domain exceptions into GraphQL errors.

Every resolver is wrapped so callers always see a GraphQLError with an
``extensions.code`` rather than a bare Python exception message.
"""

from __future__ import annotations

import functools
import logging

from graphql import GraphQLError

from shopql.domain.exceptions import (
    EntityNotFoundError,
    RecordDecodeError,
    ValidationError,
)

logger = logging.getLogger(__name__)

NOT_FOUND = "NOT_FOUND"
BAD_REQUEST = "BAD_REQUEST"
BAD_RECORD = "BAD_RECORD"
INTERNAL = "INTERNAL"


def translate_errors(resolver):
    @functools.wraps(resolver)
    def wrapper(*args, **kwargs):
        try:
            return resolver(*args, **kwargs)
        except GraphQLError:
            raise
        except EntityNotFoundError as exc:
            raise GraphQLError(str(exc), extensions={"code": NOT_FOUND}) from exc
        except ValidationError as exc:
            raise GraphQLError(str(exc), extensions={"code": BAD_REQUEST}) from exc
        except RecordDecodeError as exc:
            logger.error("Unreadable record: %s", exc)
            raise GraphQLError(str(exc), extensions={"code": BAD_RECORD}) from exc
        except Exception as exc:
            logger.exception("Unhandled error in %s", resolver.__qualname__)
            raise GraphQLError(
                "Internal server error", extensions={"code": INTERNAL}
            ) from exc

    return wrapper
