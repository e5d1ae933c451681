"""Diagnostics collected while building specs and validating assets."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class Report:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    infos: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def add_error(self, msg: str) -> None:
        self.errors.append(msg)

    def add_warning(self, msg: str) -> None:
        self.warnings.append(msg)

    def add_info(self, msg: str) -> None:
        self.infos.append(msg)

    def lines(self, ok_message: str) -> list[str]:
        """Tagged lines for CLI output; `ok_message` closes an error-free report."""
        out = [f"[INFO] {msg}" for msg in self.infos]
        out.extend(f"[WARN] {msg}" for msg in self.warnings)
        out.extend(f"[ERROR] {msg}" for msg in self.errors)
        if self.ok:
            out.append(f"[OK] {ok_message}")
        return out


def format_limited_list(values: list[str], limit: int = 12) -> str:
    if len(values) <= limit:
        return ", ".join(values)
    shown = ", ".join(values[:limit])
    return f"{shown}, ... (+{len(values) - limit} more)"
