from pydantic import BaseModel, Field


class StatsResponse(BaseModel):
    total_clubs: int = Field(alias="totalClubs")
    total_users: int = Field(alias="totalUsers")
    total_events: int = Field(alias="totalEvents")
    total_memberships: int = Field(alias="totalMemberships")

    class Config:
        populate_by_name = True


class StatsEnvelope(BaseModel):
    stats: StatsResponse
