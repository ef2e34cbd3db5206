"""Fraud Detection Routes — admin-only records of suspicious orders and members."""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from shopping_mall.api.dependencies import admin_actor
from shopping_mall.core.domain_types import Actor
from shopping_mall.infrastructure.database import get_db
from shopping_mall.models.analytics import FraudDetection
from shopping_mall.schemas.analytics import (
    FraudDetectionCreate, FraudDetectionResponse, FraudDetectionSearch,
    FraudDetectionUpdate,
)
from shopping_mall.schemas.common import Page
from shopping_mall.services.lifecycle import Lifecycle, get_lifecycle
from shopping_mall.services.listing import Listing, at_least, at_most, equals, search_page

router = APIRouter(prefix="/shoppingMall/adminUser/fraudDetections", tags=["fraud"])

FRAUD_DETECTIONS = Listing(
    FraudDetection,
    frozenset({"created_at", "updated_at", "detected_at", "risk_level", "status"}),
)


@router.patch("", response_model=Page[FraudDetectionResponse])
async def search_fraud_detections(
    body: FraudDetectionSearch,
    actor: Actor = Depends(admin_actor),
    db: AsyncSession = Depends(get_db),
):
    return await search_page(
        db, FRAUD_DETECTIONS, body,
        equals(FraudDetection.detection_type, body.detection_type),
        equals(FraudDetection.risk_level, body.risk_level),
        equals(FraudDetection.status, body.status),
        equals(FraudDetection.member_user_id, body.member_user_id),
        equals(FraudDetection.shopping_mall_order_id, body.shopping_mall_order_id),
        at_least(FraudDetection.detected_at, body.detected_from),
        at_most(FraudDetection.detected_at, body.detected_to),
        dto=FraudDetectionResponse,
    )


@router.get("/{detection_id}", response_model=FraudDetectionResponse)
async def get_fraud_detection(
    detection_id: UUID,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await lc.get_live(FraudDetection, detection_id)


@router.post("", response_model=FraudDetectionResponse, status_code=status.HTTP_201_CREATED)
async def create_fraud_detection(
    body: FraudDetectionCreate,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    return await lc.create(FraudDetection, **body.model_dump())


@router.put("/{detection_id}", response_model=FraudDetectionResponse)
async def update_fraud_detection(
    detection_id: UUID,
    body: FraudDetectionUpdate,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    detection = await lc.get_live(FraudDetection, detection_id)
    return await lc.update(detection, body.model_dump(exclude_unset=True))


@router.delete("/{detection_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_fraud_detection(
    detection_id: UUID,
    actor: Actor = Depends(admin_actor),
    lc: Lifecycle = Depends(get_lifecycle),
):
    await lc.remove(await lc.get_live(FraudDetection, detection_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
