"""
Adapter: MongoDB account repository.

Implements the AccountRepository port once for any account entity
type. Owns the mapping between string identifiers and ObjectId;
callers only ever see the hex string form.
"""

import logging
from typing import Any

from bson import ObjectId
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from account_service.domain.accounts.errors import (
    EntityNotFoundError,
    InvalidIdentifierError,
    StoreError,
)
from account_service.domain.accounts.ports import AccountRepository, AccountT

logger = logging.getLogger(__name__)


class MongoAccountRepository(AccountRepository[AccountT]):
    """MongoDB implementation of the account repository.

    Documents are stored as {_id, email, username, password_hash}.
    Every identifier-taking method validates the id before touching
    the collection, and every driver error is wrapped in StoreError.
    """

    def __init__(self, collection: Collection, entity_type: type[AccountT]) -> None:
        """Initialize the repository.

        Args:
            collection: The collection holding this entity kind.
            entity_type: Entity class built from stored documents.
        """
        self._collection = collection
        self._entity_type = entity_type
        logger.info(
            "Initialized %s repository on collection %s",
            entity_type.__name__,
            collection.name,
        )

    def get_all(self) -> list[AccountT]:
        try:
            documents = list(self._collection.find({}))
        except PyMongoError as exc:
            raise StoreError("find", str(exc)) from exc

        logger.debug("Fetched %d documents from %s", len(documents), self._collection.name)
        return [self._to_entity(doc) for doc in documents]

    def create(self, entity: AccountT) -> str:
        try:
            result = self._collection.insert_one(dict(entity.mutable_fields()))
        except PyMongoError as exc:
            raise StoreError("insert_one", str(exc)) from exc

        inserted_id = result.inserted_id
        if not isinstance(inserted_id, ObjectId):
            raise StoreError(
                "insert_one",
                f"inserted id has unexpected type {type(inserted_id).__name__}",
            )
        return str(inserted_id)

    def find_one(self, entity_id: str) -> AccountT:
        object_id = self._parse_id(entity_id)
        try:
            document = self._collection.find_one({"_id": object_id})
        except PyMongoError as exc:
            raise StoreError("find_one", str(exc)) from exc

        if document is None:
            raise EntityNotFoundError(entity_id)
        return self._to_entity(document)

    def update(self, entity: AccountT) -> None:
        object_id = self._parse_id(entity.id)
        self._set_fields(object_id, entity.mutable_fields(), "update_one")

    def partially_update(self, entity: AccountT) -> None:
        object_id = self._parse_id(entity.id)
        fields = entity.non_empty_fields()
        if not fields:
            # MongoDB rejects an empty $set.
            logger.debug("Nothing to update for id %s", entity.id)
            return
        self._set_fields(object_id, fields, "update_one")

    def delete(self, entity_id: str) -> None:
        object_id = self._parse_id(entity_id)
        try:
            result = self._collection.delete_one({"_id": object_id})
        except PyMongoError as exc:
            raise StoreError("delete_one", str(exc)) from exc
        logger.debug("Deleted %d document(s) for id %s", result.deleted_count, entity_id)

    def _set_fields(self, object_id: ObjectId, fields: dict[str, str], operation: str) -> None:
        try:
            result = self._collection.update_one({"_id": object_id}, {"$set": fields})
        except PyMongoError as exc:
            raise StoreError(operation, str(exc)) from exc
        logger.debug(
            "Updated id %s: matched=%d, modified=%d",
            object_id,
            result.matched_count,
            result.modified_count,
        )

    @staticmethod
    def _parse_id(entity_id: str) -> ObjectId:
        if not ObjectId.is_valid(entity_id):
            raise InvalidIdentifierError(entity_id)
        return ObjectId(entity_id)

    def _to_entity(self, document: dict[str, Any]) -> AccountT:
        return self._entity_type(
            id=str(document["_id"]),
            email=document.get("email") or "",
            username=document.get("username") or "",
            password_hash=document.get("password_hash") or "",
        )
