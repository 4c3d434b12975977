"""sinkline core — dispatcher, timestamp encoder, call-site resolver."""
