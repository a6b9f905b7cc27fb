"""
Rich 進度條模組

提供基於 rich 的模擬試驗進度條
"""

from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
)


class TrialProgressBar:
    """
    基於 rich 的模擬試驗進度條

    可直接作為 ConnectivitySimulator 的 progress_callback

    用法::

        with TrialProgressBar(total=100) as bar:
            simulator = ConnectivitySimulator(rng, progress_callback=bar.update)
            simulator.run_trials(n, 100)
    """

    def __init__(self, total: int) -> None:
        self._total = total
        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            BarColumn(bar_width=30),
            TaskProgressColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            TimeRemainingColumn(),
        )
        self._task_id = self._progress.add_task("Simulating", total=total)
        self._completed = 0
        self._max_edges = 0

    def __enter__(self) -> "TrialProgressBar":
        self._progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self._progress.stop()

    def update(self, completed: int, total: int, edges: int) -> None:
        """
        更新進度條

        Args:
            completed: 已完成的試驗數
            total: 試驗總數
            edges: 本次試驗所需邊數
        """
        self._completed = completed
        self._max_edges = max(self._max_edges, edges)
        description = f"trial {completed}/{total} [green]{edges}[/green] edges"
        self._progress.update(self._task_id, advance=1, description=description)

    @property
    def completed_count(self) -> int:
        """已完成的試驗數"""
        return self._completed

    @property
    def max_edges(self) -> int:
        """目前為止單次試驗的最大邊數"""
        return self._max_edges
