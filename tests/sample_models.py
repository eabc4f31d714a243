"""Record types shared by the test suite."""

from dataclasses import dataclass, field
from typing import Optional

from pydantic import BaseModel, Field


def tagged(validate: str | None = None, desc: str | None = None, **kwargs):
    """dataclasses.field() carrying validate/desc tags."""
    metadata = {}
    if validate is not None:
        metadata["validate"] = validate
    if desc is not None:
        metadata["desc"] = desc
    return field(metadata=metadata, **kwargs)


@dataclass
class City:
    city_id: int = tagged("required,min=1", "城市ID", default=0)
    city_name: str = tagged("omitempty,required,min=1,max=5", "城市名称", default="")


@dataclass
class Job:
    id: int = tagged("required,min=1", "工作ID", default=0)
    name: str = tagged("omitempty,required,min=1,max=5", "工作名称", default="")
    city: City = tagged("required", "工作城市", default_factory=City)


@dataclass
class Address:
    street: Optional[str] = tagged("required,max=10", "街道", default=None)
    city: str = tagged("required", "城市", default="")
    planet: str = tagged("required", "星球", default="")
    phone: str = tagged("required,max=11", "联系手机号", default="")


@dataclass
class User:
    fname: Optional[str] = tagged("omitempty,required,min=1", "姓氏", default=None)
    lname: str = tagged("required", "名称", default="")
    age: int = tagged("omitempty,gte=0,lte=100", "年龄", default=0)
    credit: Optional[list[Optional[int]]] = tagged("required,min=1,max=100", "学分", default=None)
    sex: Optional[int] = tagged("required,oneof=1 2", "性别", default=None)
    email: str = tagged("required,email", "邮件", default="")
    job: Optional[Job] = tagged("required", "工作", default=None)
    addresses: list[Address] = tagged("omitempty,required,min=1", "地址", default_factory=list)


@dataclass
class Person:
    fname: str = tagged("required", "姓氏", default="")
    job: Optional[Job] = tagged("required", "工作", default=None)


@dataclass
class Patient:
    age: int = tagged("gte=0,lte=100", "年龄", default=0)


@dataclass
class Untagged:
    name: str = ""
    tags: list[str] = field(default_factory=list)
    job: Optional[Job] = None


class Account(BaseModel):
    username: str = Field("", json_schema_extra={"validate": "required,min=3", "desc": "用户名"})
    role: str = Field("user", json_schema_extra={"validate": "oneof=admin user"})
    city: Optional[City] = None


def valid_user() -> User:
    """A User that passes every rule."""
    return User(
        fname="1",
        lname="我L",
        age=1,
        credit=[1],
        sex=2,
        email="a@163.com",
        job=Job(id=1, name="职位", city=City(city_id=1, city_name="12231")),
        addresses=[
            Address(street="杨浦", city="上海", planet="planetStr1", phone="11111111111"),
            Address(street="杨浦2", city="上海2", planet="planetStr2", phone="11111111112"),
        ],
    )


USER_PAYLOAD = """
{
    "fname": "1",
    "lname": "我L",
    "age": 1,
    "sex": 2,
    "credit": [1],
    "email": "a@163.com",
    "favourite_color": "rgb",
    "job": {
        "id": 1,
        "name": "职位",
        "city": {"city_id": 1, "city_name": "12231"}
    },
    "addresses": [
        {"street": "杨浦", "city": "上海", "planet": "planetStr1", "phone": "11111111111"},
        {"street": "杨浦2", "city": "上海2", "planet": "planetStr2", "phone": "11111111112"}
    ]
}
"""
