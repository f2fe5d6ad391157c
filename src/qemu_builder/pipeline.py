"""Async functional build pipeline."""

import logging
from typing import Awaitable, Callable, Iterable, Optional

from .core.matrix import get_host_config
from .core.types import BuildConfig, HostConfig
from .operations.build import build_qemu
from .operations.bundle import bundle_qemu, bundle_resources
from .operations.download import fetch_qemu
from .operations.prerequisites import install_prerequisites
from .operations.verify import verify_bundles
from .operations.xhyve import bundle_xhyve

logger = logging.getLogger(__name__)

Stage = Callable[[BuildConfig, HostConfig], Awaitable[object]]


async def _prerequisites(config: BuildConfig, host: HostConfig) -> None:
    await install_prerequisites(host)


async def _fetch(config: BuildConfig, host: HostConfig) -> None:
    await fetch_qemu(config)


async def _verify(config: BuildConfig, host: HostConfig) -> None:
    verify_bundles(config, host)


# Stages in execution order
STAGES: dict[str, Stage] = {
    "prerequisites": _prerequisites,
    "fetch": _fetch,
    "build": build_qemu,
    "resources": bundle_resources,
    "xhyve": bundle_xhyve,
    "bundle": bundle_qemu,
    "verify": _verify,
}


async def run_pipeline(
    config: Optional[BuildConfig] = None,
    host: Optional[HostConfig] = None,
    stages: Optional[Iterable[str]] = None,
) -> list[str]:
    """QEMU 빌드 파이프라인을 실행합니다.

    Args:
        config: 빌드 설정 (기본값: 환경 변수에서 생성한 BuildConfig)
        host: 호스트 설정 (기본값: 현재 플랫폼에 맞는 HostConfig)
        stages: 실행할 단계 이름 목록 (기본값: 모든 단계)
            - "prerequisites", "fetch", "build", "resources",
              "xhyve", "bundle", "verify"

    Returns:
        list[str]: 실행된 단계 이름 목록 (실행 순서대로)

    Raises:
        UnsupportedPlatformError: 지원하지 않는 호스트인 경우
        ValueError: 알 수 없는 단계 이름인 경우
        QemuBuilderError: 단계 실행 실패 시

    Examples:
        # 전체 파이프라인 실행
        await run_pipeline()

        # 번들링과 검증만 실행
        await run_pipeline(stages=["bundle", "verify"])
    """
    config = config or BuildConfig.from_env()
    host = host or get_host_config()

    selected = set(STAGES) if stages is None else set(stages)
    unknown = selected - set(STAGES)
    if unknown:
        raise ValueError(f"Unknown stages: {', '.join(sorted(unknown))}")

    executed = []
    for name, stage in STAGES.items():
        if name not in selected:
            continue
        logger.info(f"==> {name} ({host.name}, {host.cpu})")
        await stage(config, host)
        executed.append(name)
    return executed
