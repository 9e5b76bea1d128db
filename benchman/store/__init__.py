from benchman.store.sample_store import SampleStore

__all__ = ["SampleStore"]
