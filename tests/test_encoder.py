import pytest

from nestform.exceptions import AmbiguousGroupError, UnknownIndexingError
from nestform.forms import DecodedForm, NestedFormDecoder, encode


@pytest.fixture
def form():
    return DecodedForm(
        root={"name": "Vic", "grade": "11"},
        children=[
            {"name": "AP US History", "topic": "History"},
            {"name": "AP Human Geography", "topic": "History"},
        ],
    )


def test_encode_lists_root_fields_then_each_child(form):
    keys = [field.key for field in encode(form, "student", "courses")]
    assert keys == [
        "student[name]",
        "student[grade]",
        "student[courses][][name]",
        "student[courses][][topic]",
        "student[courses][][name]",
        "student[courses][][topic]",
    ]


def test_encoded_form_decodes_back(form, decoder):
    assert decoder.decode(encode(form, "student", "courses")) == form


def test_explicit_encoding_numbers_children(form):
    fields = encode(form, "student", "courses", indexing="explicit")
    assert [field.key for field in fields][2:] == [
        "student[courses][0][name]",
        "student[courses][0][topic]",
        "student[courses][1][name]",
        "student[courses][1][topic]",
    ]
    decoder = NestedFormDecoder(root_key="student", group_key="courses", indexing="explicit")
    assert decoder.decode(fields) == form


def test_explicit_encoding_handles_children_with_different_fields():
    form = DecodedForm(root={}, children=[{"name": "Art"}, {"topic": "Music"}])
    fields = encode(form, "student", "courses", indexing="explicit")
    decoder = NestedFormDecoder(root_key="student", group_key="courses", indexing="explicit")
    assert decoder.decode(fields) == form


def test_anonymous_encoding_rejects_children_that_would_merge():
    form = DecodedForm(root={}, children=[{"name": "Art"}, {"topic": "Music"}])
    with pytest.raises(AmbiguousGroupError):
        encode(form, "student", "courses")


def test_empty_child_cannot_be_encoded():
    form = DecodedForm(root={}, children=[{}])
    with pytest.raises(AmbiguousGroupError):
        encode(form, "student", "courses", indexing="explicit")


def test_encode_rejects_unknown_indexing(form):
    with pytest.raises(UnknownIndexingError):
        encode(form, "student", "courses", indexing="sparse")


@pytest.mark.parametrize("root", [{"courses": "x"}, {"": "x"}])
def test_root_fields_that_would_not_decode_back_are_rejected(root):
    form = DecodedForm(root=root)

    with pytest.raises(AmbiguousGroupError):
        encode(form, "student", "courses")


@pytest.mark.parametrize("indexing", ["anonymous", "explicit"])
def test_child_field_without_a_name_is_rejected(indexing):
    form = DecodedForm(root={"name": "Vic"}, children=[{"": "Art"}])

    with pytest.raises(AmbiguousGroupError):
        encode(form, "student", "courses", indexing=indexing)


def test_group_key_is_a_valid_child_field_name(decoder):
    form = DecodedForm(root={"name": "Vic"}, children=[{"courses": "3"}])
    assert decoder.decode(encode(form, "student", "courses")) == form
