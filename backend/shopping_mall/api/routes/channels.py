"""Channel Routes — admin management of sales channels and their sections.

Invariants:
    - channel.code is unique (pre-checked, then enforced by the table)
    - Section endpoints verify the parent channel is live first
    - A section is only reachable through its own channel
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from shopping_mall.api.dependencies import admin_actor
from shopping_mall.core.domain_types import Actor
from shopping_mall.infrastructure.database import get_db
from shopping_mall.models.catalog import Channel, Section
from shopping_mall.schemas.catalog import (
    ChannelCreate, ChannelResponse, ChannelSearch, ChannelUpdate,
    SectionCreate, SectionResponse, SectionSearch, SectionUpdate,
)
from shopping_mall.schemas.common import Page
from shopping_mall.services.lifecycle import Lifecycle, get_lifecycle
from shopping_mall.services.listing import Listing, contains, equals, search_any, search_page

router = APIRouter(prefix="/shoppingMall/adminUser/channels", tags=["channels"])

CHANNELS = Listing(Channel, frozenset({"created_at", "updated_at", "code", "name", "status"}))
SECTIONS = Listing(Section, frozenset({"created_at", "updated_at", "code", "name", "status"}))


@router.patch("", response_model=Page[ChannelResponse])
async def search_channels(
    body: ChannelSearch,
    actor: Actor = Depends(admin_actor),
    db: AsyncSession = Depends(get_db),
):
    return await search_page(
        db, CHANNELS, body,
        search_any((Channel.code, Channel.name), body.search),
        equals(Channel.code, body.code),
        contains(Channel.name, body.name),
        equals(Channel.status, body.status),
        dto=ChannelResponse,
    )


@router.get("/{channel_id}", response_model=ChannelResponse)
async def get_channel(
    channel_id: UUID,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await lc.get_live(Channel, channel_id)


@router.post("", response_model=ChannelResponse, status_code=status.HTTP_201_CREATED)
async def create_channel(
    body: ChannelCreate,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.ensure_unique(Channel, "code", body.code)
    return await lc.create(Channel, **body.model_dump())


@router.put("/{channel_id}", response_model=ChannelResponse)
async def update_channel(
    channel_id: UUID,
    body: ChannelUpdate,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    channel = await lc.get_live(Channel, channel_id)
    await lc.ensure_unique(Channel, "code", body.code, exclude_id=channel.id)
    return await lc.update(channel, body.model_dump(exclude_unset=True))


@router.delete("/{channel_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_channel(
    channel_id: UUID,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.remove(await lc.get_live(Channel, channel_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ─── Sections (nested) ───────────────────────────────────────────

@router.patch("/{channel_id}/sections", response_model=Page[SectionResponse])
async def search_sections(
    channel_id: UUID,
    body: SectionSearch,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.get_live(Channel, channel_id)
    return await search_page(
        lc.db, SECTIONS, body,
        equals(Section.shopping_mall_channel_id, channel_id),
        equals(Section.code, body.code),
        contains(Section.name, body.name),
        equals(Section.status, body.status),
        dto=SectionResponse,
    )


@router.get("/{channel_id}/sections/{section_id}", response_model=SectionResponse)
async def get_section(
    channel_id: UUID,
    section_id: UUID,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await lc.get_live(
        Section, section_id, Section.shopping_mall_channel_id == channel_id,
    )


@router.post(
    "/{channel_id}/sections", response_model=SectionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_section(
    channel_id: UUID,
    body: SectionCreate,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.get_live(Channel, channel_id)
    return await lc.create(Section, shopping_mall_channel_id=channel_id, **body.model_dump())


@router.put("/{channel_id}/sections/{section_id}", response_model=SectionResponse)
async def update_section(
    channel_id: UUID,
    section_id: UUID,
    body: SectionUpdate,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    section = await lc.get_live(
        Section, section_id, Section.shopping_mall_channel_id == channel_id,
    )
    return await lc.update(section, body.model_dump(exclude_unset=True))


@router.delete(
    "/{channel_id}/sections/{section_id}", status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_section(
    channel_id: UUID,
    section_id: UUID,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    section = await lc.get_live(
        Section, section_id, Section.shopping_mall_channel_id == channel_id,
    )
    await lc.remove(section)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
