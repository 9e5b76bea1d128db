import json
import os

import wandb

from benchman.config import ReportConfig
from benchman.constants import SUMMARY_FIELDS
from benchman.logger import init_logger
from benchman.report.report import Report

logger = init_logger(__name__)


class ReportExporter:
    def __init__(self, config: ReportConfig) -> None:
        self._config = config

    def _log_to_wandb(self, report: Report) -> None:
        stats = {}
        for entry in report:
            if not entry.summary.has_data:
                continue
            for name in SUMMARY_FIELDS:
                stats[f"{entry.label}_{name}"] = getattr(entry.summary, name)

        wandb.log(stats, step=0)

        if self._config.save_table_to_wandb:
            wandb_table = wandb.Table(dataframe=report.to_df())
            wandb.log({f"{report.tag}_stats_table": wandb_table}, step=0)

    def save(self, report: Report, output_dir: str) -> None:
        os.makedirs(output_dir, exist_ok=True)

        csv_path = f"{output_dir}/{report.tag}_stats.csv"
        report.to_df().to_csv(csv_path, index=False)

        json_path = f"{output_dir}/{report.tag}_stats.json"
        with open(json_path, "w") as f:
            json.dump(report.to_dict(), f, indent=4)

        logger.info(f"Saved {len(report)} label stats to {csv_path} and {json_path}")

        if wandb.run:
            self._log_to_wandb(report)
