"""
Integration Tests - Query pipeline and session across components.
"""
