# =============================================================================
# tests/ - Test Suite
# =============================================================================
# - test_identification.py: latest identification selection
# - test_tree_service.py: save-tree workflow against SQLite and a temp dir
# - test_storage_service.py: local and Supabase document stores
# - test_models.py: schemas, planter capability, record relationships
# - test_config.py: settings validation
# - test_api_trees.py: HTTP endpoints
#
# Run tests with: pytest
# =============================================================================
