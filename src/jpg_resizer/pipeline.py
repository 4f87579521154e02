"""Pipeline orchestrator - drives every source file through the three stages."""

from collections.abc import Callable
from pathlib import Path

from loguru import logger

from .common.paths import list_source_files
from .common.schema_job import ResizeJob, ResizeParams, ResizeReport, RunStatus
from .common.work_dir import temporary_work_dir
from .stages import ResizeStage, SameSizeReformatStage, StripReformatStage

ProgressCallback = Callable[[int, int, str, str], None]


class ResizePipeline:
    """Sequential batch resizer.

    Files are processed one at a time in enumeration order. The first stage
    failure aborts the run; outputs written for earlier files are kept. The
    temporary working directory is removed on every exit path.

    Example:
        params = ResizeParams(input_dir=src, output_dir=dst, width=400)
        report = await ResizePipeline(params).run()
    """

    def __init__(
        self,
        params: ResizeParams,
        progress_callback: ProgressCallback | None = None,
    ):
        self.params: ResizeParams = params
        self.progress_callback: ProgressCallback | None = progress_callback

    def prepare(self) -> ResizeJob | None:
        """Fix the work list, or return None when there is nothing to do."""
        source_files = list_source_files(self.params.input_dir)
        if not source_files:
            return None
        return ResizeJob(params=self.params, source_files=tuple(source_files))

    async def run(self) -> ResizeReport:
        """
        Execute the run.

        Returns:
            ResizeReport with status NO_DIMENSIONS, NO_INPUT_FILES or COMPLETED

        Raises:
            ConversionError: If any stage fails for any file
            DirectoryUnavailableError: If the temp directory cannot be created
        """
        params = self.params

        if params.resize_mode is None:
            logger.info("No width or height requested, nothing to do")
            return self._report(RunStatus.NO_DIMENSIONS)

        job = self.prepare()
        if job is None:
            logger.info(f"No source files found in {params.input_dir}")
            return self._report(RunStatus.NO_INPUT_FILES)

        converted: list[str] = []
        with temporary_work_dir(params.output_dir) as temp_dir:
            stages = self._build_stages(job, temp_dir)
            total = len(job.source_files)

            for index, original in enumerate(job.source_files, start=1):
                produced = original
                for stage in stages:
                    produced = await stage.execute(produced, original)

                converted.append(produced)
                logger.info(f"({index}/{total}) {original} -> {produced}")
                if self.progress_callback:
                    self.progress_callback(index, total, original, produced)

        return self._report(RunStatus.COMPLETED, converted)

    def _build_stages(
        self,
        job: ResizeJob,
        temp_dir: Path,
    ) -> tuple[SameSizeReformatStage, ResizeStage, StripReformatStage]:
        params = job.params
        return (
            SameSizeReformatStage(params.input_dir, temp_dir),
            ResizeStage(temp_dir, job.mode, params.width, params.height),
            StripReformatStage(temp_dir, params.output_dir),
        )

    def _report(self, status: RunStatus, converted: list[str] | None = None) -> ResizeReport:
        return ResizeReport(
            status=status,
            input_dir=self.params.input_dir,
            output_dir=self.params.output_dir,
            converted_files=converted or [],
        )


async def run_resize(
    params: ResizeParams,
    progress_callback: ProgressCallback | None = None,
) -> ResizeReport:
    return await ResizePipeline(params, progress_callback).run()
