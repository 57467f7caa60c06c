"""Fail-fast smoke run over the profile API.

Steps run strictly in order against one :class:`ProfileApiClient`. The first
failing step stops the run; the steps after it are reported as ``skipped``.
"""
import json
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from loguru import logger

from profile_hub.client.api_client import ApiError, ProfileApiClient

PASSED = 'passed'
FAILED = 'failed'
SKIPPED = 'skipped'

DEFAULT_EMAIL = 'test@example.com'
DEFAULT_PASSWORD = 'password123'


class SmokeStepError(Exception):
    """A step got a response of the wrong shape."""


@dataclass
class SmokeContext:
    client: ProfileApiClient
    email: str = DEFAULT_EMAIL
    password: str = DEFAULT_PASSWORD
    user_id: Optional[str] = None
    skill_id: Optional[str] = None


@dataclass(frozen=True)
class SmokeStep:
    name: str
    run: Callable[[SmokeContext], Any]
    description: str = ''


@dataclass
class StepResult:
    name: str
    status: str
    elapsed_ms: float = 0.0
    error: Optional[dict] = None

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'status': self.status,
            'elapsed_ms': round(self.elapsed_ms, 2),
            'error': self.error,
        }


@dataclass
class SmokeReport:
    base_url: str
    results: list[StepResult] = field(default_factory=list)

    def count(self, status: str) -> int:
        return len([item for item in self.results if item.status == status])

    @property
    def ok(self) -> bool:
        return all(item.status == PASSED for item in self.results)

    @property
    def failed_step(self) -> Optional[StepResult]:
        return next((item for item in self.results if item.status == FAILED), None)

    def to_dict(self) -> dict:
        return {
            'base_url': self.base_url,
            'total': len(self.results),
            'passed': self.count(PASSED),
            'failed': self.count(FAILED),
            'skipped': self.count(SKIPPED),
            'results': [item.to_dict() for item in self.results],
        }


def _login(ctx: SmokeContext) -> Any:
    data = ctx.client.login(ctx.email, ctx.password)
    if not data.get('token') or not ctx.client.user_id:
        raise SmokeStepError('login response is missing token or user._id')
    ctx.user_id = ctx.client.user_id
    return data


def _add_skill(ctx: SmokeContext) -> Any:
    data = ctx.client.add_skill({'name': 'JavaScript', 'level': 'advanced', 'category': 'technical'})
    skills = data.get('skills') or []
    if not skills or not skills[-1].get('_id'):
        raise SmokeStepError('skill list in response has no id for the new skill')
    ctx.skill_id = skills[-1]['_id']
    return data


def _add_experience(ctx: SmokeContext) -> Any:
    return ctx.client.add_experience(
        {
            'title': 'Software Engineer',
            'company': 'Tech Corp',
            'location': 'San Francisco, CA',
            'type': 'full-time',
            'startDate': '2024-01-01',
            'description': 'Full stack development',
            'isCurrentPosition': True,
        }
    )


def _add_education(ctx: SmokeContext) -> Any:
    return ctx.client.add_education(
        {
            'institution': 'Tech University',
            'degree': 'Bachelor of Science',
            'field': 'Computer Science',
            'startYear': 2020,
            'endYear': 2024,
            'achievements': ["Dean's List", 'First Class Honors'],
        }
    )


def _add_portfolio(ctx: SmokeContext) -> Any:
    return ctx.client.add_portfolio_item(
        {
            'title': 'E-commerce Platform',
            'description': 'Built a full-stack e-commerce platform',
            'type': 'project',
            'technologies': ['React', 'Node.js', 'MongoDB'],
            'url': 'https://github.com/example/project',
        }
    )


def _endorse_skill(ctx: SmokeContext) -> Any:
    return ctx.client.endorse_skill(ctx.user_id, ctx.skill_id, note='Great JavaScript developer!')


def _update_availability(ctx: SmokeContext) -> Any:
    return ctx.client.update_availability(
        for_mentoring=True,
        for_job_opportunities=True,
        for_networking=True,
    )


def default_steps() -> list[SmokeStep]:
    return [
        SmokeStep('login', _login, 'Login successful'),
        SmokeStep('add_skill', _add_skill, 'Skill added successfully'),
        SmokeStep('add_experience', _add_experience, 'Experience added successfully'),
        SmokeStep('add_education', _add_education, 'Education added successfully'),
        SmokeStep('add_portfolio', _add_portfolio, 'Portfolio item added successfully'),
        SmokeStep('endorse_skill', _endorse_skill, 'Skill endorsed successfully'),
        SmokeStep('update_availability', _update_availability, 'Availability updated successfully'),
    ]


def _error_detail(exc: Exception) -> dict:
    if isinstance(exc, ApiError):
        return exc.to_dict()
    return {'message': str(exc), 'detail': str(exc), 'type': type(exc).__name__}


def run_steps(steps: list[SmokeStep], ctx: SmokeContext) -> SmokeReport:
    report = SmokeReport(base_url=ctx.client.base_url)
    failed = False
    for step in steps:
        if failed:
            report.results.append(StepResult(name=step.name, status=SKIPPED))
            continue
        started = time.perf_counter()
        try:
            step.run(ctx)
        except Exception as exc:
            # any step error ends the run; unexpected ones keep their type in the report
            elapsed = (time.perf_counter() - started) * 1000
            detail = _error_detail(exc)
            if isinstance(exc, (ApiError, SmokeStepError)):
                logger.error('smoke.step.failed', step=step.name, detail=detail)
            else:
                logger.exception('smoke.step.crashed', step=step.name, detail=detail)
            report.results.append(StepResult(name=step.name, status=FAILED, elapsed_ms=elapsed, error=detail))
            failed = True
            continue
        elapsed = (time.perf_counter() - started) * 1000
        logger.info('smoke.step.passed', step=step.name, elapsed_ms=round(elapsed, 2))
        report.results.append(StepResult(name=step.name, status=PASSED, elapsed_ms=elapsed))
    return report


def report_lines(report: SmokeReport, steps: list[SmokeStep]) -> list[str]:
    descriptions = {step.name: step.description or step.name for step in steps}
    lines = []
    for result in report.results:
        if result.status == PASSED:
            lines.append(f"✓ {descriptions[result.name]}")
        elif result.status == FAILED:
            detail = (result.error or {}).get('detail')
            lines.append(f"✗ {result.name} failed: {json.dumps(detail, ensure_ascii=False, default=str)}")
            lines.append(json.dumps(result.error, ensure_ascii=False, indent=2, default=str))
        else:
            lines.append(f"- {result.name} skipped")
    if report.ok:
        lines.append('\nAll tests passed successfully! ✨')
    return lines
