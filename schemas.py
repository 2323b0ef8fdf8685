from pydantic import BaseModel, ConfigDict, EmailStr, Field


# Authors
class AuthorSummaryDTO(BaseModel):
    id: int
    firstname: str
    lastname: str

    model_config = ConfigDict(from_attributes=True)


class AuthorCreateDTO(BaseModel):
    firstname: str = Field(min_length=1, max_length=100)
    lastname: str = Field(min_length=1, max_length=100)

    model_config = ConfigDict(str_strip_whitespace=True)


class AuthorUpdateDTO(AuthorCreateDTO):
    id: int


# Books
class BookSummaryDTO(BaseModel):
    id: int
    title: str
    year: int | None
    isbn: str

    model_config = ConfigDict(from_attributes=True)


class AuthorDTO(AuthorSummaryDTO):
    books: list[BookSummaryDTO] = []


class BookCreateDTO(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    year: int | None = Field(default=None, ge=0, le=9999)
    isbn: str = Field(min_length=1, max_length=32)
    summary: str | None = Field(default=None, max_length=500)
    image: str | None = None
    author_id: int | None = None

    model_config = ConfigDict(str_strip_whitespace=True)


class BookUpdateDTO(BookCreateDTO):
    id: int


class BookDTO(BaseModel):
    id: int
    title: str
    year: int | None
    isbn: str
    summary: str | None
    image: str | None
    author_id: int | None
    author: AuthorSummaryDTO | None = None

    model_config = ConfigDict(from_attributes=True)


# Users
class UserLoginDTO(BaseModel):
    username: str = Field(min_length=1, max_length=255, description="Username or email address")
    password: str = Field(min_length=1, max_length=128)


class UserRegisterDTO(BaseModel):
    username: str = Field(min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)


class UserPublic(BaseModel):
    id: int
    username: str
    email: EmailStr
    roles: list[str]


class TokenResponse(BaseModel):
    token: str
    token_type: str = "bearer"
