from fng.domain.reading.schedule.refresh_schedule import RefreshSchedule

__all__ = ["RefreshSchedule"]
