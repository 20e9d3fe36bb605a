"""
Schema of the decoded `groups` query response.
"""

from pydantic import ConfigDict

from .group import MerkleTreeData, SubgraphModel, VerifiedProofData


class RawMember(SubgraphModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    identity_commitment: str


class RawGroup(SubgraphModel):
    id: str
    merkle_tree: MerkleTreeData
    admin: str
    members: list[RawMember] | None = None
    verified_proofs: list[VerifiedProofData] | None = None


class GroupsResponse(SubgraphModel):
    groups: list[RawGroup]
