"""Application orchestration entry points."""

from __future__ import annotations

import importlib
from logging import getLogger
from typing import TYPE_CHECKING

from apiconvention.adapters.python import (
    build_actions,
    build_convention_source,
    convention_sources_for,
    find_controllers,
)
from apiconvention.adapters.report import ActionReport, DescriptionReport
from apiconvention.config import get_inference_config
from apiconvention.conventions import DefaultApiConventions
from apiconvention.domain.inference import ConventionInference

if TYPE_CHECKING:
    from apiconvention.config import InferenceConfig
    from apiconvention.domain.model import ConventionSource


log = getLogger(__name__)


def describe_module(
    module_name: str,
    *,
    config: InferenceConfig | None = None,
    inference: ConventionInference | None = None,
) -> DescriptionReport:
    """Infer response metadata for every controller action defined in ``module_name``."""

    effective_config = config or get_inference_config()
    engine = inference or ConventionInference(
        default_error_type=effective_config.default_error_type,
    )
    fallback_sources: tuple[ConventionSource, ...] = (
        (build_convention_source(DefaultApiConventions),)
        if effective_config.include_default_conventions
        else ()
    )

    module = importlib.import_module(module_name)
    controllers = find_controllers(module)
    log.info("Describing %s: controllers=%s", module_name, len(controllers))

    reports: list[ActionReport] = []
    for controller in controllers:
        reports.extend(_describe_controller(controller, engine, fallback_sources))

    report = DescriptionReport(module=module_name, actions=reports)
    log.info(
        f"Finished describing {module_name}: actions={len(report.actions)}, "
        f"unmatched={len(report.unmatched)}"
    )
    return report


def _describe_controller(
    controller: type,
    engine: ConventionInference,
    fallback_sources: tuple[ConventionSource, ...],
) -> list[ActionReport]:
    sources = (*convention_sources_for(controller), *fallback_sources)
    actions = build_actions(controller)
    results = engine.resolve_many(actions, sources)
    return [
        ActionReport.from_result(action, result)
        for action, result in zip(actions, results, strict=True)
    ]
