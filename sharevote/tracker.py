import time


class RecoveryTracker:
    """In-memory audit trail of one or more reconstruction runs."""

    def __init__(self):
        self.logs = {}

    def _event(self, recovery_id, event, **details):
        log = self.logs.get(recovery_id)
        if log is None:
            return
        entry = {"time": time.time(), "event": event}
        entry.update(details)
        log["events"].append(entry)

    def log_recovery_start(self, recovery_id, threshold, entries):
        self.logs[recovery_id] = {
            "start_time": time.time(),
            "status": "initiated",
            "threshold": threshold,
            "entries": entries,
            "skipped_shares": {},
            "rejected_combinations": {},
            "events": [{"time": time.time(), "event": "recovery_started"}]
        }

    def log_share_skipped(self, recovery_id, key, reason):
        if recovery_id in self.logs:
            self.logs[recovery_id]["skipped_shares"][key] = reason
            self._event(recovery_id, "share_skipped", key=key, reason=reason)

    def log_combination_rejected(self, recovery_id, reason):
        # counted per reason only; C(n, k) events would not fit in memory
        if recovery_id in self.logs:
            rejected = self.logs[recovery_id]["rejected_combinations"]
            rejected[reason] = rejected.get(reason, 0) + 1

    def log_limit_reached(self, recovery_id, limit):
        self._event(recovery_id, "combination_limit_reached", limit=limit)

    def log_recovery_success(self, recovery_id, secret, votes):
        if recovery_id in self.logs:
            self.logs[recovery_id]["status"] = "success"
            self.logs[recovery_id]["end_time"] = time.time()
            self._event(recovery_id, "recovery_success", secret=secret, votes=votes)

    def log_recovery_failure(self, recovery_id, reason):
        if recovery_id in self.logs:
            self.logs[recovery_id]["status"] = "failed"
            self.logs[recovery_id]["end_time"] = time.time()
            self._event(recovery_id, "recovery_failed", reason=reason)

    def get_log(self, recovery_id):
        return self.logs.get(recovery_id)

    def events(self, recovery_id, kind=None):
        log = self.logs.get(recovery_id)
        if log is None:
            return []
        if kind is None:
            return list(log["events"])
        return [e for e in log["events"] if e["event"] == kind]
