"""HTTP plumbing shared by every bounded context's routers."""
