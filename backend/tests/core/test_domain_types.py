"""Domain Types — actor roles, route segments and ownership checks."""

from uuid import uuid4

from shopping_mall.core.domain_types import (
    Actor, ActorId, ActorType, SoftDeleteMode, TokenType,
)


def test_route_segments_match_url_prefixes():
    assert ActorType.MEMBER.route_segment == "memberUser"
    assert ActorType.SELLER.route_segment == "sellerUser"
    assert ActorType.ADMIN.route_segment == "adminUser"
    assert ActorType.GUEST.route_segment == "guestUser"


def test_enums_serialize_to_strings():
    assert TokenType.REFRESH == "refresh"
    assert SoftDeleteMode("deleted") is SoftDeleteMode.DELETED


def test_actor_owns_only_matching_id():
    uid = uuid4()
    actor = Actor(id=ActorId(uid), type=ActorType.MEMBER)
    assert actor.owns(uid)
    assert not actor.owns(uuid4())
    assert not actor.owns(None)
