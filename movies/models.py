"""Typed records for the bundled movie and review data files"""
from pydantic import BaseModel, ConfigDict, Field


class Movie(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(..., gt=0)
    name: str = Field(..., alias='movieName')
    director: str
    year: int
    genre: str
    description: str
    duration: int = Field(..., description="Running time in minutes")
    rating: float = Field(..., alias='imdbRating')

    def to_dict(self):
        """Serialized form, keyed like the data file"""
        return self.model_dump(by_alias=True)


class Review(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    movie_id: int = Field(..., alias='movieId', gt=0)
    user_name: str = Field(..., alias='userName')
    avatar_emoji: str = Field(default='🙂', alias='avatarEmoji')
    rating: int = Field(..., ge=1, le=5)
    comment: str

    def to_dict(self):
        return self.model_dump(by_alias=True)
