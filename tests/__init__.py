"""
Test suite for kmeans_clustering.

This package contains all tests organized by component:
- test_algorithms/: Tests for distance, centroids, seeding, assignment,
  the K-Means loop and best-of-N selection
- test_utils/: Tests for configuration, logging and random sources
- test_cli/: Tests for dataset loading, JSON output and the CLI
"""
