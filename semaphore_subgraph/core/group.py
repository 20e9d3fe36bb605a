"""
Core group data models, as handed back to callers.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SubgraphModel(BaseModel):
    # The subgraph speaks camelCase; we accept either spelling.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MerkleTreeData(SubgraphModel):
    root: str
    depth: int
    zero_value: str
    number_of_leaves: int


class VerifiedProofData(SubgraphModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    signal: str
    merkle_tree_root: str
    external_nullifier: str
    nullifier_hash: str
    timestamp: str


class GroupData(SubgraphModel):
    id: str
    merkle_tree: MerkleTreeData
    admin: str
    # Only set when requested; never defaulted to an empty list.
    members: list[str] | None = None
    verified_proofs: list[VerifiedProofData] | None = None

    def to_response(self) -> dict[str, Any]:
        """
        The group in the subgraph's own shape, without unrequested fields.
        """
        return self.model_dump(by_alias=True, exclude_unset=True)
