from pydantic import BaseModel, StrictInt, StrictStr
from typing import List


class StudentBase(BaseModel):
    # strict: "age": "20" is a decode error, not a coercion
    name: StrictStr = ""
    age: StrictInt = 0
    email: StrictStr = ""


class StudentCreate(StudentBase):

    def invalid_fields(self) -> List[str]:
        """Names of the fields failing presence validation."""
        invalid = []
        if not self.name:
            invalid.append("name")
        if self.age <= 0:
            invalid.append("age")
        if not self.email:
            invalid.append("email")
        return invalid


class StudentIdResponse(BaseModel):
    id: int


class SummaryResponse(BaseModel):
    summary: str


class Student(StudentBase):
    id: int
