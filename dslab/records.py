"""Student records kept in a sequential file of fixed-size binary entries."""

from __future__ import annotations

import os
import struct
import sys
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

DEFAULT_PATH = "Records.dat"
TEXT_SIZE = 20
_LAYOUT = struct.Struct(f"<ii{TEXT_SIZE}s{TEXT_SIZE}sff")


def _encode_text(text: str, field: str) -> bytes:
    data = text.encode("utf-8")
    if len(data) >= TEXT_SIZE:
        raise ValueError(f"{field} must be shorter than {TEXT_SIZE} bytes")
    return data


def _decode_text(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


@dataclass
class StudentRecord:
    rollno: int
    name: str
    subcode: int
    subject: str
    internal_marks: float
    uni_marks: float

    def pack(self) -> bytes:
        """Encode as one fixed-size file entry."""
        try:
            return _LAYOUT.pack(
                self.rollno,
                self.subcode,
                _encode_text(self.name, "name"),
                _encode_text(self.subject, "subject"),
                self.internal_marks,
                self.uni_marks,
            )
        except struct.error as error:
            raise ValueError(str(error)) from error

    @classmethod
    def unpack(cls, data: bytes) -> StudentRecord:
        rollno, subcode, name, subject, internal, uni = _LAYOUT.unpack(data)
        return cls(rollno, _decode_text(name), subcode, _decode_text(subject), internal, uni)

    def format(self) -> str:
        return (
            f"\nRoll No: {self.rollno}\tName: {self.name}"
            f"\nSubject Code: {self.subcode}\tSubject: {self.subject}"
            f"\nInternal: {self.internal_marks:g}\tUniversity: {self.uni_marks:g}\n"
        )


class RecordFile:
    """Sequential file of student records."""

    def __init__(self, path: str | os.PathLike = DEFAULT_PATH) -> None:
        self.path = Path(path)

    def insert(self, record: StudentRecord) -> None:
        data = record.pack()
        with open(self.path, "ab") as stream:
            stream.write(data)

    def records(self) -> Iterator[StudentRecord]:
        try:
            stream = open(self.path, "rb")
        except FileNotFoundError:
            return
        with stream:
            while len(chunk := stream.read(_LAYOUT.size)) == _LAYOUT.size:
                yield StudentRecord.unpack(chunk)

    def find(self, rollno: int) -> StudentRecord:
        for record in self.records():
            if record.rollno == rollno:
                return record
        raise KeyError(rollno)

    def delete(self, rollno: int) -> bool:
        """Drop every record with ``rollno``; return whether any was found."""
        if not self.path.exists():
            return False
        kept = []
        found = False
        for record in self.records():
            if record.rollno == rollno:
                found = True
            else:
                kept.append(record)
        directory = self.path.parent if str(self.path.parent) else Path(".")
        with tempfile.NamedTemporaryFile("wb", dir=directory, delete=False) as temp:
            for record in kept:
                temp.write(record.pack())
        os.replace(temp.name, self.path)
        return found

    def edit(self, rollno: int, record: StudentRecord) -> bool:
        """Overwrite the first record with ``rollno`` in place."""
        data = record.pack()
        try:
            stream = open(self.path, "r+b")
        except FileNotFoundError:
            return False
        with stream:
            while len(chunk := stream.read(_LAYOUT.size)) == _LAYOUT.size:
                if StudentRecord.unpack(chunk).rollno == rollno:
                    stream.seek(-_LAYOUT.size, os.SEEK_CUR)
                    stream.write(data)
                    return True
        return False


def _read_record(tokens: Iterator[str]) -> StudentRecord:
    print("\nEnter Roll No: ", end="")
    rollno = int(next(tokens))
    print("Name: ", end="")
    name = next(tokens)
    print("Subject Code: ", end="")
    subcode = int(next(tokens))
    print("Subject Name: ", end="")
    subject = next(tokens)
    print("Internal Marks: ", end="")
    internal = float(next(tokens))
    print("University Marks: ", end="")
    uni = float(next(tokens))
    return StudentRecord(rollno, name, subcode, subject, internal, uni)


def main(argv=None) -> int:
    """Interactive menu over the records file in the current directory."""
    store = RecordFile()
    tokens = (word for line in sys.stdin for word in line.split())
    menu = (
        "\n--- MENU ---\n1. Insert\n2. Display\n3. Search\n4. Delete\n5. Edit\n"
        "6. Exit\nChoice: "
    )
    while True:
        print(menu, end="")
        try:
            choice = int(next(tokens))
            if choice == 1:
                store.insert(_read_record(tokens))
            elif choice == 2:
                for record in store.records():
                    print(record.format(), end="")
            elif choice == 3:
                print("Enter Roll No: ", end="")
                roll = int(next(tokens))
                try:
                    print(store.find(roll).format(), end="")
                except KeyError:
                    print("\nRecord not found.")
            elif choice == 4:
                print("Enter Roll No to Delete: ", end="")
                print("Deleted." if store.delete(int(next(tokens))) else "Not Found.")
            elif choice == 5:
                print("Enter Roll No to Edit: ", end="")
                roll = int(next(tokens))
                if any(r.rollno == roll for r in store.records()):
                    print("\nEnter new details:")
                    print("Updated." if store.edit(roll, _read_record(tokens)) else "Not Found.")
                else:
                    print("Not Found.")
            elif choice == 6:
                break
            else:
                print("Invalid choice.")
        except (StopIteration, ValueError) as error:
            if str(error):
                print(error, file=sys.stderr)
            break
    return 0


if __name__ == "__main__":
    sys.exit(main())