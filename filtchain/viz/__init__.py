from .chart import frequency_response, plot_filter_response, plot_filtered_signal

__all__ = ["frequency_response", "plot_filter_response", "plot_filtered_signal"]
