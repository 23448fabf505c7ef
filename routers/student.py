from typing import List
from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import ValidationError

from models.student import Student, StudentCreate, StudentIdResponse, SummaryResponse
from store import StudentStore
from errors import InvalidFields, InvalidId, MalformedBody, NotFound
from log import log_action

router = APIRouter(prefix="/students", tags=["students"])

SUMMARY_TEMPLATE = "Student {name} is {age} years old and can be contacted at {email}."


def get_store(request: Request) -> StudentStore:
    return request.app.state.store


def parse_student_id(student_id: str) -> int:
    """Path dependency: ids must be positive base-10 integers."""
    if not (student_id.isascii() and student_id.isdigit()):
        raise InvalidId()
    value = int(student_id)
    if value <= 0:
        raise InvalidId()
    return value


async def read_student_payload(request: Request) -> StudentCreate:
    body = await request.body()
    try:
        student = StudentCreate.model_validate_json(body)
    except ValidationError:
        raise MalformedBody()

    invalid = student.invalid_fields()
    if invalid:
        raise InvalidFields(f"Invalid student data: {', '.join(invalid)}")
    return student


def build_summary(student: Student) -> str:
    return SUMMARY_TEMPLATE.format(name=student.name, age=student.age, email=student.email)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=StudentIdResponse)
def create_student(
        student: StudentCreate = Depends(read_student_payload),
        store: StudentStore = Depends(get_store),
):
    student_id = store.add(student)
    log_action("STUDENT_CREATED", f"id={student_id} name={student.name}")
    return StudentIdResponse(id=student_id)


@router.get("", response_model=List[Student])
def get_students(store: StudentStore = Depends(get_store)):
    return store.get_all()


@router.get("/{student_id}", response_model=Student)
def get_student(
        student_id: int = Depends(parse_student_id),
        store: StudentStore = Depends(get_store),
):
    student = store.get(student_id)
    if student is None:
        raise NotFound()
    return student


# id is parsed before the body is read
@router.put("/{student_id}")
def update_student(
        student_id: int = Depends(parse_student_id),
        student: StudentCreate = Depends(read_student_payload),
        store: StudentStore = Depends(get_store),
):
    if not store.update(student_id, student):
        raise NotFound()

    log_action("STUDENT_UPDATED", f"id={student_id} name={student.name}")
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{student_id}")
def delete_student(
        student_id: int = Depends(parse_student_id),
        store: StudentStore = Depends(get_store),
):
    if not store.delete(student_id):
        raise NotFound()

    log_action("STUDENT_DELETED", f"id={student_id}")
    return Response(status_code=status.HTTP_200_OK)


@router.get("/{student_id}/summary", response_model=SummaryResponse)
def generate_summary(
        student_id: int = Depends(parse_student_id),
        store: StudentStore = Depends(get_store),
):
    student = store.get(student_id)
    if student is None:
        raise NotFound()
    return SummaryResponse(summary=build_summary(student))
