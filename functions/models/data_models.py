from dataclasses import asdict, dataclass


@dataclass
class SweepResult:
    users_scanned: int = 0
    deleted_count: int = 0

    def to_json(self):
        return asdict(self)
