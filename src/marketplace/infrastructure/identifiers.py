"""uuid4-backed implementation of IdentifierGenerator."""

from __future__ import annotations

import uuid

from marketplace.domain.service.identifier_generator import IdentifierGenerator


class UuidIdentifierGenerator(IdentifierGenerator):

    def next_id(self) -> uuid.UUID:
        return uuid.uuid4()
