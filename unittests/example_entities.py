"""
Contains some small business objects which follow the getter/setter/adder naming convention.
"""
# pylint: disable=invalid-name
from typing import Any, Optional


class Address:
    def __init__(self):
        self.city: Optional[str] = None
        self.street: Optional[str] = None

    def getCity(self) -> Optional[str]:
        return self.city

    def setCity(self, city: str):
        self.city = city

    def getStreet(self) -> Optional[str]:
        return self.street

    def setStreet(self, street: str):
        self.street = street


class Person:
    def __init__(self):
        self.firstname: Optional[str] = None
        self.email: Optional[str] = None
        self.address = Address()
        self.phone_calls: list[tuple[str, Any]] = []
        self.tags: list[str] = []

    def getFirstname(self) -> Optional[str]:
        return self.firstname

    def setFirstname(self, firstname: str):
        self.firstname = firstname

    def getEmail(self) -> Optional[str]:
        return self.email

    def setEmail(self, email: str):
        self.email = email

    def getAddress(self) -> Address:
        return self.address

    def addPhone(self, number: str, kind: str = "home"):
        self.phone_calls.append(("add", (number, kind)))

    def setPhone(self, value: Any):
        self.phone_calls.append(("set", value))

    def addTag(self, tag: str):
        self.tags.append(tag)


class Company:
    """Has no getter for its address, hence nested values for `address` cannot be reached"""

    def __init__(self):
        self.name: Optional[str] = None

    def setName(self, name: str):
        self.name = name
