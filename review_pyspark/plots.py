# plotting model results
## spark does not plot, collect the (small) prediction frame to pandas first
## seaborn works directly with pandas DataFrames and is built on top of matplotlib
import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import seaborn as sns  # noqa: E402


def plot_predicted_vs_actual(frame, response: str, path) -> str:
    fig, ax = plt.subplots(figsize=(6, 6))
    sns.scatterplot(data=frame, x="prediction", y=response, alpha=0.5, ax=ax)
    ## a perfect model puts every point on this line
    low = min(frame["prediction"].min(), frame[response].min())
    high = max(frame["prediction"].max(), frame[response].max())
    ax.plot([low, high], [low, high], linestyle="--", color="grey")
    ax.set_title(f"predicted vs actual {response}")
    fig.savefig(path)
    plt.close(fig)
    return str(path)


def plot_residuals(frame, path) -> str:
    fig, ax = plt.subplots(figsize=(6, 4))
    sns.histplot(data=frame, x="residual", kde=True, ax=ax)
    ax.axvline(0, linestyle="--", color="grey")
    ax.set_title("residuals")
    fig.savefig(path)
    plt.close(fig)
    return str(path)
