"""ROI financial model: investment scaling, benefit composition, aggregation."""
