"""Pure helper functions shared by the pipeline stages."""
