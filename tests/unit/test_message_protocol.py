# pylint: disable=missing-module-docstring,missing-function-docstring

import json

import pytest

from protocol.messages import (
    InvalidAckId,
    MalformedFrame,
    MessageProtocolError,
    UnknownFrameType,
    decode_inbound,
    encode_ack,
    encode_sentence,
)


def test_decode_sentence_with_ack_id():
    inbound = decode_inbound('{"type":"sentence","sentence":"L-R-Z","ack_id":7}')

    assert inbound.sentence == "L-R-Z"
    assert inbound.ack_id == 7
    assert inbound.expects_ack


def test_missing_ack_id_means_no_ack():
    inbound = decode_inbound('{"type":"sentence","sentence":"----------"}')

    assert inbound.ack_id is None
    assert not inbound.expects_ack


def test_non_string_sentence_passes_through():
    # Type checking is the validator's job, not the codec's
    inbound = decode_inbound('{"type":"sentence","sentence":12}')

    assert inbound.sentence == 12


def test_bytes_payload_accepted():
    inbound = decode_inbound(b'{"type":"sentence","sentence":"BBKZ","ack_id":"a1"}')

    assert inbound.ack_id == "a1"


@pytest.mark.parametrize(
    ("payload", "error"),
    [
        ("not json", MalformedFrame),
        ("[1, 2]", MalformedFrame),
        ('{"sentence":"BBKZ"}', UnknownFrameType),
        ('{"type":"ack","ack_id":1}', UnknownFrameType),
        ('{"type":"sentence","sentence":"BBKZ","ack_id":true}', InvalidAckId),
        ('{"type":"sentence","sentence":"BBKZ","ack_id":[1]}', InvalidAckId),
    ],
)
def test_malformed_frames_raise(payload: str, error: type[MessageProtocolError]):
    with pytest.raises(error):
        decode_inbound(payload)


def test_encode_ack_shape():
    assert json.loads(encode_ack(7)) == {
        "type": "ack",
        "ack_id": 7,
        "payload": "received",
    }


def test_encode_sentence_is_decodable():
    inbound = decode_inbound(encode_sentence("ZZ-LL", ack_id=3))

    assert inbound.sentence == "ZZ-LL"
    assert inbound.ack_id == 3
