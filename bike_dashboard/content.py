"""Static text for the Overview and Model Info pages."""

from bike_dashboard.records import SCHEMA

PROBLEM_STATEMENT = "Analysis of Used Bikes Prices for greater profit and Efficiency in Business"

OUTPUT_VARIABLES = (
    "The main output variable is price, which predicts the market value of used bikes "
    "in Indian Rupees (INR). The model estimates prices based on historical data and "
    "current market trends, providing a reliable reference point for both buyers and sellers."
)

MODEL_DETAILS = {
    "Model Type": {
        "title": "Random Forest Regressor",
        "description": (
            "A sophisticated ensemble learning method that operates by constructing multiple "
            "decision trees during training. This model was chosen for its ability to handle "
            "non-linear relationships and provide robust predictions for bike prices based on "
            "multiple features."
        ),
    },
    "Key Features": {
        "title": "Input Variables",
        "description": (
            "The model utilizes several crucial features for prediction:\n\n"
            "- Bike Name & Brand: Identifies specific models and manufacturers\n"
            "- City: Location-based price variations\n"
            "- Kilometers Driven: Measures usage and wear\n"
            "- Owner History: Number of previous owners\n"
            "- Age: Vehicle age in years\n"
            "- Engine Power: Power rating in CC"
        ),
    },
    "Performance Metrics": {
        "title": "Model Evaluation",
        "description": (
            "The model demonstrates strong predictive performance:\n\n"
            "- **Kappa Statistic**: how much two raters (or systems) agree when classifying "
            "something, allowing for agreement by chance.\n"
            "- **Mean Absolute Error**: average magnitude of the differences between predicted "
            "and actual prices.\n"
            "- **Root Mean Square Error**: square root of the average squared difference between "
            "predicted and actual prices.\n"
            "- **Relative Absolute Error (RAE)**: absolute error as a percentage of that of a "
            "baseline model that always predicts the mean.\n"
            "- **Root Relative Squared Error (RRSE)**: square root of the squared error relative "
            "to the same baseline."
        ),
    },
}


def dataset_fields():
    """One 'name: description' line per listing field."""
    return [f"{f.name}: {f.description}" for f in SCHEMA]
