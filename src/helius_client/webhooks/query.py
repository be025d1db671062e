"""Validate and normalize collection queries."""

from collections.abc import Mapping

from pydantic import TypeAdapter, ValidationError

from helius_client.errors import InvalidQueryError
from helius_client.webhooks.models import ByCollections, ByCreators, CollectionQuery

_CREATORS_KEYS = ("firstVerifiedCreators", "first_verified_creators")
_COLLECTIONS_KEYS = ("verifiedCollectionAddresses", "verified_collection_addresses")

_query_adapter = TypeAdapter(CollectionQuery)


def _pick(raw: Mapping, keys: tuple[str, ...]):
    for key in keys:
        if raw.get(key) is not None:
            return raw[key]
    return None


def validate_collection_query(query: ByCreators | ByCollections | Mapping | None) -> CollectionQuery:
    """Return a typed query, or raise InvalidQueryError.

    Accepts an already-typed ``ByCreators``/``ByCollections`` or a wire-shaped
    mapping carrying exactly one of ``firstVerifiedCreators`` and
    ``verifiedCollectionAddresses``. Address contents are not checked here.
    """
    if query is None:
        raise InvalidQueryError("must provide collectionQuery object.")
    if isinstance(query, (ByCreators, ByCollections)):
        return query
    if not isinstance(query, Mapping):
        raise InvalidQueryError(f"unsupported collection query type: {type(query).__name__}")

    creators = _pick(query, _CREATORS_KEYS)
    collections = _pick(query, _COLLECTIONS_KEYS)

    if creators is not None and collections is not None:
        raise InvalidQueryError(
            "cannot provide both firstVerifiedCreators and verifiedCollectionAddresses. "
            "Please only provide one."
        )
    if creators is None and collections is None:
        raise InvalidQueryError(
            "must provide one of firstVerifiedCreators or verifiedCollectionAddresses."
        )

    if creators is not None:
        raw = {"kind": "creators", "firstVerifiedCreators": creators}
    else:
        raw = {"kind": "collections", "verifiedCollectionAddresses": collections}
    try:
        return _query_adapter.validate_python(raw)
    except ValidationError as exc:
        raise InvalidQueryError(str(exc)) from exc
