# -*- coding: utf-8 -*-

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, status

from ...services.context import Services
from ..deps import get_actor, get_services
from ..schemas import ApplicationIn, InterviewIn, JobIn, StatusIn

router = APIRouter(tags=["recruitment"])


# -----------------
# İlanlar
# -----------------
@router.get("/jobs")
def list_jobs(
    company_id: Optional[int] = None,
    status: Optional[str] = None,
    services: Services = Depends(get_services),
):
    return services.recruitment.list_jobs(company_id, status)


@router.get("/jobs/active")
def list_active_jobs(company_id: Optional[int] = None, services: Services = Depends(get_services)):
    return services.recruitment.list_active_jobs(company_id)


@router.get("/jobs/{job_id}")
def get_job(job_id: int, services: Services = Depends(get_services)):
    return services.recruitment.get_job(job_id)


@router.post("/jobs", status_code=status.HTTP_201_CREATED)
def create_job(body: JobIn, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    return services.recruitment.create_job(body.data(), actor=actor)


@router.put("/jobs/{job_id}")
def update_job(job_id: int, body: JobIn, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    return services.recruitment.update_job(job_id, body.data(), actor=actor)


@router.delete("/jobs/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_job(job_id: int, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    services.recruitment.delete_job(job_id, actor=actor)


# -----------------
# Başvurular
# -----------------
@router.get("/job-applications")
def list_applications(
    job_id: Optional[int] = None,
    status: Optional[str] = None,
    company_id: Optional[int] = None,
    services: Services = Depends(get_services),
):
    return services.recruitment.list_applications(job_id, status, company_id)


@router.get("/job-applications/{app_id}")
def get_application(app_id: int, services: Services = Depends(get_services)):
    return services.recruitment.get_application(app_id)


@router.post("/job-applications", status_code=status.HTTP_201_CREATED)
def create_application(body: ApplicationIn, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    return services.recruitment.create_application(body.data(), actor=actor)


@router.put("/job-applications/{app_id}/status")
def update_application_status(
    app_id: int,
    body: StatusIn,
    services: Services = Depends(get_services),
    actor: str = Depends(get_actor),
):
    return services.recruitment.update_application_status(app_id, body.status, body.notes, actor=actor)


@router.delete("/job-applications/{app_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_application(app_id: int, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    services.recruitment.delete_application(app_id, actor=actor)


# -----------------
# Mülakatlar
# -----------------
@router.get("/interviews")
def list_interviews(application_id: Optional[int] = None, services: Services = Depends(get_services)):
    return services.recruitment.list_interviews(application_id)


@router.get("/interviews/{interview_id}")
def get_interview(interview_id: int, services: Services = Depends(get_services)):
    return services.recruitment.get_interview(interview_id)


@router.post("/interviews", status_code=status.HTTP_201_CREATED)
def create_interview(body: InterviewIn, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    return services.recruitment.create_interview(body.data(), actor=actor)


@router.put("/interviews/{interview_id}")
def update_interview(
    interview_id: int,
    body: InterviewIn,
    services: Services = Depends(get_services),
    actor: str = Depends(get_actor),
):
    return services.recruitment.update_interview(interview_id, body.data(), actor=actor)


@router.delete("/interviews/{interview_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_interview(interview_id: int, services: Services = Depends(get_services), actor: str = Depends(get_actor)):
    services.recruitment.delete_interview(interview_id, actor=actor)
