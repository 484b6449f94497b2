"""
In-memory job queue.

This package provides:
- The job data model and its lifecycle (queued, in progress, concluded, cancelled)
- A thread-safe repository owning the job index and the pending queue
- HTTP routes mapping repository operations and errors onto the API
"""
