"""omn-server: configuration and record-fetch HTTP service over a simulated store."""
