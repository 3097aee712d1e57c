import time
from tqdm import tqdm


class ProgressTracker:
    def __init__(self, total: int, show_progress: bool = True, desc: str = "  Detecting resolution"):
        self.total = total
        self.completed = 0
        self.found = 0
        self.skipped = 0
        self.start_time = time.time()
        self.pbar = None
        if show_progress and total:
            self.pbar = tqdm(total=total, desc=desc, unit="ch", leave=False)

    def update(self, found: bool):
        self.completed += 1
        if found:
            self.found += 1
        else:
            self.skipped += 1
        if self.pbar:
            self.pbar.update(1)
            self.pbar.set_postfix(found=self.found, skipped=self.skipped)

    def get_elapsed_time(self) -> float:
        return time.time() - self.start_time

    def close(self):
        if self.pbar:
            self.pbar.close()
            self.pbar = None
