"""Shared configuration, logging, errors, and HTTP plumbing."""
