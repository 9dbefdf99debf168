# -*- coding: utf-8 -*-

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, status

from ...services.context import Services
from ..deps import get_actor, get_services
from ..schemas import EnrollIn, EnrollmentCompleteIn, TrainingIn

router = APIRouter(prefix="/trainings", tags=["trainings"])


@router.get("")
def list_trainings(
    company_id: Optional[int] = None,
    status: Optional[str] = None,
    services: Services = Depends(get_services),
):
    return services.trainings.list(company_id, status)


@router.get("/enrollments/employee/{employee_id}")
def list_employee_enrollments(employee_id: int, services: Services = Depends(get_services)):
    return services.trainings.enrollments(employee_id=employee_id)


@router.post("/enrollments/{enrollment_id}/complete")
def complete_enrollment(
    enrollment_id: int,
    body: Optional[EnrollmentCompleteIn] = None,
    services: Services = Depends(get_services),
    actor: str = Depends(get_actor),
):
    return services.trainings.complete_enrollment(enrollment_id, body.score if body else None, actor=actor)


@router.post("/enrollments/{enrollment_id}/cancel")
def cancel_enrollment(enrollment_id: int, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    return services.trainings.cancel_enrollment(enrollment_id, actor=actor)


@router.get("/{training_id}")
def get_training(training_id: int, services: Services = Depends(get_services)):
    return services.trainings.get(training_id)


@router.get("/{training_id}/enrollments")
def list_enrollments(training_id: int, services: Services = Depends(get_services)):
    return services.trainings.enrollments(training_id=training_id)


@router.post("/{training_id}/enrollments", status_code=status.HTTP_201_CREATED)
def enroll(
    training_id: int,
    body: EnrollIn,
    services: Services = Depends(get_services),
    actor: str = Depends(get_actor),
):
    return services.trainings.enroll(training_id, body.employee_id, actor=actor)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_training(body: TrainingIn, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    return services.trainings.create(body.data(), actor=actor)


@router.put("/{training_id}")
def update_training(
    training_id: int,
    body: TrainingIn,
    services: Services = Depends(get_services),
    actor: str = Depends(get_actor),
):
    return services.trainings.update(training_id, body.data(), actor=actor)


@router.delete("/{training_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_training(training_id: int, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    services.trainings.delete(training_id, actor=actor)
