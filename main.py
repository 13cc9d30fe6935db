from __future__ import annotations

import os
from typing import Optional

from scholarpage.config import (
    DEFAULT_OUT_DIR,
    DEFAULT_PUBLICATION_SOURCE,
    DEFAULT_TEACHING_SOURCE,
    PUBLICATIONS_FRAGMENT,
    RUN_LOG,
    TEACHING_FRAGMENT,
)
from scholarpage.io_utils import safe_write_file
from scholarpage.log_utils import logger, LogSource, LogCategory
from scholarpage.pipelines import PublicationPipeline, TeachingPipeline


def main(
    teaching_source: str = DEFAULT_TEACHING_SOURCE,
    publication_source: str = DEFAULT_PUBLICATION_SOURCE,
    out_dir: Optional[str] = None,
) -> int:
    """
    Load the teaching and publication sources, render both HTML fragments,
    and write them to the output directory.

    Returns an exit code suitable for use as a command-line entry point:
    0 when both sources loaded, 1 when either failed (its warning fragment is
    still written), 2 when the output directory cannot be created.
    """
    if out_dir is None:
        out_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), DEFAULT_OUT_DIR)
    try:
        os.makedirs(out_dir, exist_ok=True)
    except OSError as e:
        logger.error(f"Cannot create output directory '{out_dir}': {e}", category=LogCategory.ERROR)
        return 2

    logger.set_log_file(os.path.join(out_dir, RUN_LOG))
    logger.step("Site fragment build started", source=LogSource.SYSTEM, category=LogCategory.PLAN)

    pipelines = [
        (TeachingPipeline(teaching_source), TEACHING_FRAGMENT),
        (PublicationPipeline(publication_source), PUBLICATIONS_FRAGMENT),
    ]

    failed = 0
    for pipeline, fragment in pipelines:
        if not pipeline.load():
            failed += 1
        path = os.path.join(out_dir, fragment)
        if safe_write_file(path, pipeline.render() + "\n"):
            logger.success(f"Wrote {path}", source=pipeline.source_name, category=LogCategory.SAVE)
        else:
            logger.error(f"Could not write {path}", source=pipeline.source_name, category=LogCategory.ERROR)
            failed += 1

    logger.step("Build complete", source=LogSource.SYSTEM, category=LogCategory.PLAN)
    logger.info(f"Log file: {logger.log_file_path or 'n/a'}", source=LogSource.SYSTEM, category=LogCategory.PLAN)
    logger.close()
    return 0 if failed == 0 else 1


if __name__ == "__main__":
    raise SystemExit(main())
