"""
User Service - credential store on the `users` collection.

Passwords are stored as bcrypt hashes only. Documents returned from this
service never include the hash unless explicitly asked for (login).
"""

from datetime import datetime, timezone
from typing import Optional
from bson import ObjectId
from pymongo.collection import Collection
from pymongo.database import Database

from app.db.mongodb import get_collection, COLLECTIONS


class UserService:
    """Handles user account storage and lookup."""

    def __init__(self, db: Database = None):
        self.collection: Collection = get_collection(COLLECTIONS["users"], db)

    def create(self, name: str, email: str, password_hash: str) -> dict:
        """
        Insert a new user.

        Raises pymongo.errors.DuplicateKeyError when the email is taken
        (unique index on `email`).
        """
        doc = {
            "name": name,
            "email": email.strip().lower(),
            "password": password_hash,
            "createdAt": datetime.now(timezone.utc),
        }
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        doc.pop("password")
        return doc

    def get_by_email(self, email: str, with_password: bool = False) -> Optional[dict]:
        projection = None if with_password else {"password": 0}
        return self.collection.find_one({"email": email.strip().lower()}, projection)

    def get_by_id(self, user_id: str) -> Optional[dict]:
        """Fetch user by ObjectId string. Malformed ids resolve to None."""
        if not ObjectId.is_valid(user_id):
            return None
        return self.collection.find_one({"_id": ObjectId(user_id)}, {"password": 0})


def public_user(user: dict) -> dict:
    """User document as returned to clients."""
    return {
        "_id": str(user["_id"]),
        "name": user["name"],
        "email": user["email"],
        "createdAt": user.get("createdAt"),
    }
