"""Checkin: daily ikuuu check-in automation.

This package logs a list of accounts into an ikuuu (SSPanel) service, claims
the daily check-in reward for each of them concurrently, and reports the
per-account results to the CI environment it runs in.
"""
