"""
Users extractor
"""

from typing import Any, Mapping

from migration.base import EntityExtractor
from models import User
from models import source
from schemas.rows import UserRow


class UsersExtractor(EntityExtractor):
    """Copy API users; password hashes are copied as stored"""
    
    name = "users"
    model = User
    source_table = source.users
    
    def transform(self, record: Mapping[str, Any]) -> UserRow:
        return UserRow(
            id=record["id"],
            username=record["username"],
            password=record["password"],
        )
