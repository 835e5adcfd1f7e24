import pytest

from guit_county.database import entities
from guit_county.database.entities.base import DocumentMixin


@pytest.mark.parametrize("document, title", [
    (entities.News(title="Road Repairs Begin"), "Road Repairs Begin"),
    (entities.Military(rank="Colonel", name="Gatwech Koang"), "Colonel Gatwech Koang"),
    (entities.Military(name="Gatwech Koang"), "Gatwech Koang"),
    (entities.Artist(full_name="Nyajime Duoth", stage_name="Nyaji"), "Nyaji"),
    (entities.Artist(full_name="Nyajime Duoth"), "Nyajime Duoth"),
    (entities.Leader(title="Chief", full_name="Kuol Deng"), "Chief Kuol Deng"),
    (entities.Student(first_name="Nyakuoth", last_name="Gatdet"), "Nyakuoth Gatdet"),
    (entities.Student(full_name="Nyakuoth M. Gatdet", first_name="Nyakuoth"), "Nyakuoth M. Gatdet"),
    (entities.Boma(name="Nyal", payam="Guit"), "Nyal (Guit)"),
    (entities.History(title="County founded", year="2016"), "2016: County founded"),
    (entities.User(email="admin@guitcounty.gov"), "admin@guitcounty.gov"),
    (entities.Setting(), "Site settings"),
])
def test_display_titles(document, title):
    assert document.display_title == title


def test_every_collection_defines_a_display_title():
    for name in entities.__all__:
        entity = getattr(entities, name)
        if isinstance(entity, type) and issubclass(entity, DocumentMixin):
            assert entity.display_title is not DocumentMixin.display_title, name


def test_serialization_hides_private_columns():
    user = entities.User(username="admin", email="a@b.c", password="hash", role="admin", revision=3)
    document = user.to_document()
    assert "password" not in document
    assert "revision" not in document
    assert document["username"] == "admin"
    assert "firstName" in document
