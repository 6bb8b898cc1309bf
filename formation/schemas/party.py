"""Party and issue input schemas."""

from pydantic import BaseModel, Field

from formation.models.election import Issue, Party


class IssueSchema(BaseModel):
    """Policy issue with its public importance."""

    id: str
    name: str = ""
    importance: float = Field(default=0.5, ge=0, le=1)

    class Config:
        populate_by_name = True

    def to_entity(self) -> Issue:
        return Issue(id=self.id, name=self.name, importance=self.importance)

    @classmethod
    def from_entity(cls, issue: Issue) -> "IssueSchema":
        return cls(id=issue.id, name=issue.name, importance=issue.importance)


class PartySchema(BaseModel):
    """Party as submitted for an election."""

    id: str
    name: str
    vote_count: int = Field(alias="voteCount", ge=0)
    seats: int = Field(default=0, ge=0)
    issue_positions: dict[str, float] = Field(alias="issuePositions", default_factory=dict)
    economic_axis: float = Field(alias="economicAxis", default=0.0, ge=-10, le=10)
    social_axis: float = Field(alias="socialAxis", default=0.0, ge=-10, le=10)
    explicit_exclusions: list[str] = Field(alias="explicitExclusions", default_factory=list)

    class Config:
        populate_by_name = True

    def to_entity(self) -> Party:
        return Party(
            id=self.id,
            name=self.name,
            vote_count=self.vote_count,
            seats=self.seats,
            issue_positions=dict(self.issue_positions),
            economic_axis=self.economic_axis,
            social_axis=self.social_axis,
            explicit_exclusions=frozenset(self.explicit_exclusions),
        )

    @classmethod
    def from_entity(cls, party: Party) -> "PartySchema":
        return cls(
            id=party.id,
            name=party.name,
            vote_count=party.vote_count,
            seats=party.seats,
            issue_positions=dict(party.issue_positions),
            economic_axis=party.economic_axis,
            social_axis=party.social_axis,
            explicit_exclusions=sorted(party.explicit_exclusions),
        )
