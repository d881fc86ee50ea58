from .window_classifier import WindowBucket, DAY_WINDOWS, classify
