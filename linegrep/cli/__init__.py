"""linegrep command line tools."""
