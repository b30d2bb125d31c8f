"""tdiff - character diffs and program output testing."""
