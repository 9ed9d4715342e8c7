from dataclasses import dataclass


@dataclass
class InterpreterConfig:
    max_workers: int = 1  # >1 fans batch entries out over a thread pool
    fail_fast: bool = False  # Re-raise the first NoRangeAvailable in a batch
    use_reference_catalog: bool = True  # Fill missing normal_ranges from the catalog
