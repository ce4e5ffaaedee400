"""Sample contacts used to populate a fresh, empty book."""

from __future__ import annotations

from contactbook.data.models import Person


def get_sample_persons() -> list[Person]:
    return [
        Person("Alex Yeoh", "87438807", "alexyeoh@example.com",
               "Blk 30 Geylang Street 29, #06-40", frozenset({"friends"})),
        Person("Bernice Yu", "99272758", "berniceyu@example.com",
               "Blk 30 Lorong 3 Serangoon Gardens, #07-18", frozenset({"colleagues", "friends"})),
        Person("Charlotte Oliveiro", "93210283", "charlotte@example.com",
               "Blk 11 Ang Mo Kio Street 74, #11-04", frozenset({"neighbours"})),
        Person("David Li", "91031282", "lidavid@example.com",
               "Blk 436 Serangoon Gardens Street 26, #16-43", frozenset({"family"})),
    ]
