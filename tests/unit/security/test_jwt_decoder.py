"""Unit tests for structural decoding and the claim model."""

from __future__ import annotations

import pytest

from jwt_guard.security.jwt import (
    Body,
    ErrorKind,
    Header,
    InvalidTokenStructureError,
    Token,
    TokenDecoder,
    TokenValidator,
    TokenValidatorOptions,
)
from jwt_guard.testing import encode_segment, make_token

DECODER = TokenDecoder()

RFC_EXAMPLE = (
    "eyJ0eXAiOiJKV1QiLA0KICJhbGciOiJIUzI1NiJ9"
    ".eyJpc3MiOiJqb2UiLA0KICJleHAiOjEzMDA4MTkzODAsDQogImh0dHA6Ly9leGFtcGxlLmNvbS9pc19yb290Ijp0cnVlfQ"
    ".dBjftJeZ4CVP-mB92K27uhbUJU1p1r_wW1gFWFOEjXk"
)


# ---------------------------------------------------------------------------
# Segments
# ---------------------------------------------------------------------------


class TestSegments:
    @pytest.mark.parametrize(
        "raw",
        ["", "abc", "e30.e30", "e30.e30.sig.extra", "e30.e30.sig.", "...."],
    )
    def test_wrong_segment_count_is_structural_error(self, raw: str) -> None:
        with pytest.raises(InvalidTokenStructureError):
            DECODER.decode(raw)

    def test_empty_signature_segment_is_accepted(self) -> None:
        token = DECODER.decode("e30.e30.")
        assert token.signature == ""

    def test_signature_is_kept_verbatim_and_not_decoded(self) -> None:
        token = DECODER.decode("e30.e30.not*base64")
        assert token.signature == "not*base64"

    def test_segments_and_signing_input_are_retained(self) -> None:
        token = DECODER.decode(RFC_EXAMPLE)
        header, body, _ = RFC_EXAMPLE.split(".")
        assert token.header_segment == header
        assert token.body_segment == body
        assert token.signing_input == f"{header}.{body}".encode("ascii")

    def test_non_string_input_is_structural_error(self) -> None:
        with pytest.raises(InvalidTokenStructureError):
            DECODER.decode(b"e30.e30.")  # type: ignore[arg-type]

    def test_invalid_base64_in_header(self) -> None:
        with pytest.raises(InvalidTokenStructureError):
            DECODER.decode("e3$0.e30.")

    def test_invalid_base64_in_body(self) -> None:
        with pytest.raises(InvalidTokenStructureError):
            DECODER.decode("e30.e30xx.")


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------


class TestJson:
    @pytest.mark.parametrize("body", ["[]", '"text"', "42", "null", "true"])
    def test_non_object_body_is_structural_error(self, body: str) -> None:
        with pytest.raises(InvalidTokenStructureError):
            DECODER.decode(make_token(body=body))

    @pytest.mark.parametrize("body", ["{", '{"a":}', "", "{'a': 1}", '{"a": NaN}'])
    def test_unparsable_body_is_structural_error(self, body: str) -> None:
        with pytest.raises(InvalidTokenStructureError):
            DECODER.decode(make_token(body=body))

    def test_non_object_header_is_structural_error(self) -> None:
        with pytest.raises(InvalidTokenStructureError):
            DECODER.decode(make_token(header="[1]"))

    def test_invalid_utf8_is_structural_error(self) -> None:
        with pytest.raises(InvalidTokenStructureError):
            DECODER.decode(make_token(body=b'{"iss":"\xff"}'))

    @pytest.mark.parametrize("depth", [990, 1200])
    @pytest.mark.parametrize(("opener", "closer"), [('{"a":', "}"), ("[", "]")])
    def test_deep_nesting_returns_a_value(self, depth: int, opener: str, closer: str) -> None:
        body = '{"n":' + opener * depth + "1" + closer * depth + "}"
        ok, token, error = TokenValidator(TokenValidatorOptions.permissive()).try_get_value(
            make_token(body=body)
        )
        if ok:
            assert "n" in token.body  # type: ignore[union-attr]
        else:
            assert error.kind is ErrorKind.INVALID_TOKEN_STRUCTURE  # type: ignore[union-attr]

    def test_pathological_nesting_is_structural_error(self) -> None:
        depth = 100_000
        body = '{"a":' * depth + "1" + "}" * depth
        with pytest.raises(InvalidTokenStructureError):
            DECODER.decode(make_token(body=body))

    def test_empty_object_decodes(self) -> None:
        token = DECODER.decode(make_token(body="{}"))
        assert len(token.body) == 0


# ---------------------------------------------------------------------------
# Duplicate claim names
# ---------------------------------------------------------------------------


class TestDuplicateClaims:
    def test_registered_claim_last_occurrence_wins(self) -> None:
        token = DECODER.decode(make_token(body='{"iss":"joe","iss":"ben"}'))
        assert token.body.issuer == "ben"
        assert token.body["iss"] == "ben"

    def test_custom_claim_last_occurrence_wins(self) -> None:
        token = DECODER.decode(make_token(body='{"custom":"a","iss":"joe","custom":"b"}'))
        assert token.body.claims["custom"] == "b"
        assert len(token.body) == 2

    def test_document_order_not_alphabetical(self) -> None:
        token = DECODER.decode(make_token(body='{"x":"z","x":"a"}'))
        assert token.body["x"] == "a"

    def test_nested_objects_resolve_the_same_way(self) -> None:
        token = DECODER.decode(make_token(body='{"ctx":{"role":"user","role":"admin"}}'))
        assert token.body["ctx"] == {"role": "admin"}

    def test_header_duplicates(self) -> None:
        token = DECODER.decode(make_token(header='{"alg":"none","alg":"HS256"}'))
        assert token.header.algorithm == "HS256"

    def test_earlier_invalid_numeric_date_is_discarded(self) -> None:
        token = DECODER.decode(make_token(body='{"exp":"soon","exp":1300819380}'))
        assert token.body.expiration_time == 1300819380


# ---------------------------------------------------------------------------
# NumericDate
# ---------------------------------------------------------------------------


class TestNumericDate:
    @pytest.mark.parametrize("claim", ["exp", "nbf", "iat"])
    @pytest.mark.parametrize("value", ['"test"', "1.1", "true", "false", "[1]", '{"s":1}', "1e400"])
    def test_non_integer_value_is_structural_error(self, claim: str, value: str) -> None:
        with pytest.raises(InvalidTokenStructureError) as info:
            DECODER.decode(make_token(body=f'{{"{claim}":{value}}}'))
        assert info.value.detail == {"claim": claim}

    def test_integer_value_is_kept(self) -> None:
        token = DECODER.decode(make_token(body={"exp": 1, "nbf": 2, "iat": 3}))
        assert (token.body.expiration_time, token.body.not_before, token.body.issued_at) == (1, 2, 3)

    def test_integral_float_is_normalised(self) -> None:
        token = DECODER.decode(make_token(body='{"exp":1300819380.0}'))
        assert token.body.expiration_time == 1300819380
        assert isinstance(token.body.expiration_time, int)

    def test_exponent_notation_integral_value(self) -> None:
        token = DECODER.decode(make_token(body='{"iat":1.5e1}'))
        assert token.body.issued_at == 15

    def test_null_is_treated_as_absent(self) -> None:
        token = DECODER.decode(make_token(body='{"exp":null}'))
        assert token.body.expiration_time is None
        assert "exp" not in token.body


# ---------------------------------------------------------------------------
# Registered claim types
# ---------------------------------------------------------------------------


class TestRegisteredClaims:
    def test_rfc_example(self) -> None:
        token = DECODER.decode(RFC_EXAMPLE)
        assert token.header.type == "JWT"
        assert token.header.claims["alg"] == "HS256"
        assert token.header.algorithm == "HS256"
        assert token.body.issuer == "joe"
        assert token.body.expiration_time == 1300819380
        assert token.body.claims["http://example.com/is_root"] is True

    def test_all_registered_accessors(self) -> None:
        body = {
            "iss": "issuer",
            "sub": "subject",
            "aud": "api",
            "exp": 30,
            "nbf": 10,
            "iat": 5,
            "jti": "id-1",
        }
        token = DECODER.decode(make_token(body=body))
        b = token.body
        assert b.issuer == "issuer"
        assert b.subject == "subject"
        assert b.audience == ("api",)
        assert b.expiration_time == 30
        assert b.not_before == 10
        assert b.issued_at == 5
        assert b.jwt_id == "id-1"
        assert b.custom_claims == {}

    def test_absent_claims_are_none(self) -> None:
        b = DECODER.decode(make_token(body={})).body
        assert b.issuer is None
        assert b.subject is None
        assert b.audience is None
        assert b.expiration_time is None
        assert b.not_before is None
        assert b.issued_at is None
        assert b.jwt_id is None

    def test_audience_array(self) -> None:
        token = DECODER.decode(make_token(body={"aud": ["a", "b"]}))
        assert token.body.audience == ("a", "b")

    @pytest.mark.parametrize("value", ["1", "[1]", '["a",2]', '{"a":"b"}', "true"])
    def test_audience_wrong_type(self, value: str) -> None:
        with pytest.raises(InvalidTokenStructureError):
            DECODER.decode(make_token(body=f'{{"aud":{value}}}'))

    @pytest.mark.parametrize("claim", ["iss", "sub", "jti"])
    def test_string_claims_wrong_type(self, claim: str) -> None:
        with pytest.raises(InvalidTokenStructureError):
            DECODER.decode(make_token(body=f'{{"{claim}":123}}'))

    @pytest.mark.parametrize("claim", ["typ", "alg"])
    def test_header_claims_wrong_type(self, claim: str) -> None:
        with pytest.raises(InvalidTokenStructureError):
            DECODER.decode(make_token(header=f'{{"{claim}":1}}'))

    def test_custom_claims_pass_through(self) -> None:
        token = DECODER.decode(
            make_token(body={"iss": "joe", "roles": ["a"], "ctx": {"x": 1}, "n": None})
        )
        assert token.body.custom_claims == {"roles": ["a"], "ctx": {"x": 1}, "n": None}
        assert token.body["ctx"] == {"x": 1}

    def test_unknown_header_claims_pass_through(self) -> None:
        token = DECODER.decode(make_token(header={"alg": "HS256", "kid": "k1"}))
        assert token.header.custom_claims == {"kid": "k1"}


# ---------------------------------------------------------------------------
# Claim set and token values
# ---------------------------------------------------------------------------


class TestClaimSet:
    def test_is_read_only(self) -> None:
        body = Body({"iss": "joe"})
        with pytest.raises(TypeError):
            body["iss"] = "ben"  # type: ignore[index]
        with pytest.raises(TypeError):
            body.claims["iss"] = "ben"  # type: ignore[index]

    def test_built_from_pairs_last_wins(self) -> None:
        assert Body([("sub", "a"), ("sub", "b")]).subject == "b"

    def test_mapping_equality(self) -> None:
        assert Header({"alg": "HS256"}) == {"alg": "HS256"}

    def test_token_is_frozen(self) -> None:
        token = Token(Header({}), Body({}))
        with pytest.raises(AttributeError):
            token.signature = "x"  # type: ignore[misc]

    def test_to_dict_copies(self) -> None:
        body = Body({"iss": "joe"})
        data = body.to_dict()
        data["iss"] = "ben"
        assert body.issuer == "joe"

    def test_encode_segment_helper_roundtrip(self) -> None:
        assert DECODER.decode(f"{encode_segment({'alg': 'none'})}.e30.").header.algorithm == "none"
