from nestform.forms.decoder import NestedFormDecoder, decode
from nestform.forms.encoder import encode
from nestform.forms.models import DecodedForm, FieldPath, SubmissionField
from nestform.forms.paths import field_name
from nestform.forms.submission import from_pairs, parse_urlencoded

__all__ = [
    "DecodedForm",
    "FieldPath",
    "NestedFormDecoder",
    "SubmissionField",
    "decode",
    "encode",
    "field_name",
    "from_pairs",
    "parse_urlencoded",
]
