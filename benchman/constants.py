""" Names and constants shared by the stats engine and the report layer """

P95 = 95
P99 = 99

# statistics a highlight rule may compare
HIGHLIGHT_METRICS = ("mean", "median", "p95", "p99", "max")

# column order of machine readable exports
SUMMARY_FIELDS = ("count", "mean", "median", "p95", "p99", "min", "max", "std")

LABEL_STR = "Label"
PARENT_STR = "Parent"
DEPTH_STR = "Depth"
