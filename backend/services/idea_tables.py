# FILE: backend/services/idea_tables.py
"""
Static content the idea generator draws from.
Everything here is read-only; the generator copies before shuffling.
"""
from typing import Any, Dict, List, Tuple

# ================== TITLES ==================

TITLES: Dict[str, Tuple[str, ...]] = {
    "AIML": (
        "Smart Disease Predictor",
        "Customer Churn Analyzer",
        "Fake News Detector",
        "Plant Leaf Disease Detection",
        "Voice Assistant",
        "Movie Recommendation Engine",
        "Sentiment Analyzer",
        "Traffic Sign Detector",
    ),
    "Web Dev": (
        "E-Commerce Platform",
        "Task Management SaaS",
        "Real-time Chat App",
        "Portfolio Generator",
        "Crowdfunding Portal",
    ),
    "Data Science": (
        "Stock Market Visualizer",
        "Global Warming Trends Dashboard",
        "Sports Performance Analysis",
        "Crypto Price Tracker",
        "Housing Price Insights",
    ),
    "Cyber Security": (
        "Packet Sniffer Tool",
        "Password Strength Analyzer",
        "Network Intrusion Detector",
        "Encrypted Chat System",
        "Malware Signature Scanner",
    ),
    "App Dev": (
        "Fitness Tracker",
        "Budget Manager",
        "Recipe Finder",
        "Meditation Timer",
        "Local Event Finder",
    ),
}

FALLBACK_TITLES = TITLES["Web Dev"]

# ================== PROBLEMS ==================

PROBLEMS: Dict[str, Tuple[str, ...]] = {
    "AIML": (
        "Early detection of diseases is crucial but often delayed due to lack of accessible tools.",
        "Businesses lose revenue because they cannot predict when customers will leave.",
        "Misinformation spreads faster than manual fact-checkers can respond.",
        "Crop losses grow when plant diseases are identified too late.",
    ),
    "Web Dev": (
        "Small businesses struggle to set up online stores quickly and affordably.",
        "Remote teams lack unified tools for managing tasks effectively.",
        "Existing communication tools are bloated and slow.",
    ),
    "Data Science": (
        "Large public datasets exist but few people can turn them into clear insights.",
        "Investors make decisions on gut feeling because historical data is hard to explore.",
        "Coaches lack objective metrics to track and compare athlete performance.",
    ),
    "Cyber Security": (
        "Users often use weak passwords, making them vulnerable to hacks.",
        "Public networks are insecure, leading to data theft.",
        "Malware is evolving faster than traditional antivirus signatures.",
    ),
}

FALLBACK_PROBLEMS: Tuple[str, ...] = (
    "Manual processes are inefficient and prone to error.",
    "Data is scattered and hard to analyze.",
    "Users lack a centralized platform for this task.",
)

# ================== FEATURES ==================

FEATURES_BASE: Tuple[str, ...] = (
    "User Authentication",
    "Responsive Design",
    "Dashboard Analytics",
    "Export Reports (PDF/CSV)",
    "Dark Mode Support",
)

BASE_FEATURE_COUNT = 2

FEATURES_DOMAIN: Dict[str, Tuple[str, ...]] = {
    "AIML": (
        "Model Training Interface",
        "Real-time Prediction",
        "Confusion Matrix Visualization",
        "Dataset Upload Support",
        "Model Export (.pkl/.h5)",
        "Hyperparameter Tuning Panel",
        "Prediction History Log",
    ),
    "Web Dev": (
        "Payment Gateway Integration",
        "Real-time Notifications (WebSockets)",
        "CMS for Admin",
        "Social Media Login",
        "SEO Optimization",
        "Role-based Access Control",
        "Full-text Search",
    ),
    "Cyber Security": (
        "Packet Capture Engine",
        "Encryption (AES-256)",
        "Vulnerability Scanning",
        "Log Analysis",
        "IP Blocking",
        "Alerting via Email/Slack",
    ),
    "Data Science": (
        "Interactive Charts (D3/Plotly)",
        "Data Cleaning Pipeline",
        "Statistical Summary",
        "Predictive Modeling",
        "CSV/Excel Import",
        "Scheduled Data Refresh",
    ),
    "App Dev": (
        "Push Notifications",
        "Offline Mode",
        "GPS/Location Services",
        "Camera Integration",
        "App Store Optimization",
        "Cloud Sync",
    ),
}

FEATURE_COUNT_BY_LEVEL: Dict[str, int] = {
    "Beginner": 2,
    "Intermediate": 4,
    "Advanced": 6,
}

# ================== ML CONFIG ==================

ML_CONFIG: Dict[str, Dict[str, Any]] = {
    "Beginner": {
        "models": ("Logistic Regression", "Decision Tree", "K-Nearest Neighbors"),
        "type": "Supervised Learning",
        "metrics": ("Accuracy", "Mean Absolute Error"),
    },
    "Intermediate": {
        "models": ("Random Forest", "Support Vector Machine", "Gradient Boosting"),
        "type": "Supervised Learning (Ensemble)",
        "metrics": ("F1 Score", "ROC-AUC"),
    },
    "Advanced": {
        "models": ("XGBoost", "LSTM", "Deep Neural Network"),
        "type": "Deep Learning",
        "metrics": ("ROC-AUC", "F1 Score", "RMSE"),
    },
}

SUPERVISED_TITLE_HINTS = ("Predictor", "Analyzer")
VISION_TITLE_HINTS = ("Detector", "Detection")
NLP_TITLE_HINTS = ("Engine", "Assistant")

DEFAULT_LEARNING_TYPE = "Supervised Learning"
VISION_LEARNING_TYPE = "Supervised Learning (Computer Vision)"
NLP_LEARNING_TYPE = "Natural Language Processing"
VISION_ADVANCED_MODEL = "CNN (ResNet-50)"
NLP_ADVANCED_MODEL = "Transformers (BERT)"
VISION_METRIC = "F1 Score"
NLP_METRIC = "Precision"

# (stage, details); details may use {model} / {metric}
ML_PIPELINE_STAGES: Tuple[Tuple[str, str], ...] = (
    ("Data Collection", "Gather raw data from public datasets, APIs or manual labelling."),
    ("Data Preprocessing", "Handle missing values, normalize numeric columns and encode categories."),
    ("Exploratory Data Analysis", "Plot distributions and correlations to understand the data."),
    ("Feature Engineering", "Select and construct the features with the strongest signal."),
    ("Model Training", "Train a {model} model with a train/validation split and cross-validation."),
    ("Model Evaluation", "Measure performance on a held-out test set using {metric}."),
)

ADVANCED_NOTES: Dict[str, str] = {
    "optimization": "Tune hyperparameters with Optuna or grid search and apply early stopping to avoid overfitting.",
    "explainability": "Use SHAP or LIME to explain individual predictions and global feature importance.",
    "scalability": "Serve the model behind a REST API in Docker and batch predictions for high throughput.",
}

# ================== TECH STACK ==================

TECH_STACK_DEFAULT: Dict[str, Tuple[str, ...]] = {
    "Python": ("Python", "Tkinter/PyQt", "SQLite"),
    "JavaScript": ("JavaScript", "Electron", "Node.js"),
    "Java": ("Java", "Spring Boot", "MySQL", "Thymeleaf"),
    "C++": ("C++", "STL", "CMake", "Qt"),
}

TECH_STACK: Dict[Tuple[str, str], Tuple[str, ...]] = {
    ("Python", "Web Dev"): ("Python", "Django/FastAPI", "PostgreSQL", "HTML/CSS"),
    ("Python", "AIML"): ("Python", "Pandas", "NumPy", "Scikit-Learn", "TensorFlow", "Jupyter"),
    ("Python", "Data Science"): ("Python", "Pandas", "NumPy", "Matplotlib/Seaborn", "Plotly", "Jupyter"),
    ("Python", "Cyber Security"): ("Python", "Scapy", "Cryptography", "SQLite"),
    ("JavaScript", "Web Dev"): ("React", "Node.js", "Express", "MongoDB", "TailwindCSS"),
    ("JavaScript", "App Dev"): ("React Native", "Expo", "Firebase"),
    ("JavaScript", "AIML"): ("JavaScript", "TensorFlow.js", "Node.js", "Express"),
    ("Java", "App Dev"): ("Java", "Android SDK", "Firebase", "XML Layouts"),
    ("Java", "AIML"): ("Java", "Deeplearning4j", "Weka", "Spring Boot"),
    ("C++", "Cyber Security"): ("C++", "OpenSSL", "libpcap", "Wireshark"),
    ("C++", "AIML"): ("C++", "OpenCV", "LibTorch", "CMake"),
}

# ================== FOLDER STRUCTURE ==================

_PYTHON_STRUCTURE = """
project-root/
├── main.py
├── requirements.txt
├── src/
│   ├── modules/
│   ├── utils/
│   └── data/
├── tests/
└── README.md"""

_JAVASCRIPT_STRUCTURE = """
project-root/
├── package.json
├── src/
│   ├── components/
│   ├── pages/
│   └── api/
├── public/
└── README.md"""

_JAVA_STRUCTURE = """
project-root/
├── pom.xml
├── src/
│   ├── main/
│   │   ├── java/
│   │   └── resources/
│   └── test/
└── README.md"""

_CPP_STRUCTURE = """
project-root/
├── CMakeLists.txt
├── include/
├── src/
│   └── main.cpp
├── tests/
└── README.md"""

_AIML_PYTHON_STRUCTURE = """
project-root/
├── data/
│   ├── raw/
│   └── processed/
├── notebooks/
│   └── exploration.ipynb
├── models/
├── src/
│   ├── preprocess.py
│   ├── train.py
│   └── evaluate.py
├── requirements.txt
└── README.md"""

_DATA_SCIENCE_PYTHON_STRUCTURE = """
project-root/
├── data/
├── notebooks/
├── reports/
│   └── figures/
├── src/
│   ├── load.py
│   └── analysis.py
├── requirements.txt
└── README.md"""

_WEB_JAVASCRIPT_STRUCTURE = """
project-root/
├── client/
│   ├── src/
│   │   ├── components/
│   │   └── pages/
│   └── package.json
├── server/
│   ├── routes/
│   ├── models/
│   └── server.js
└── README.md"""

_ANDROID_JAVA_STRUCTURE = """
project-root/
├── app/
│   ├── src/main/
│   │   ├── java/
│   │   ├── res/layout/
│   │   └── AndroidManifest.xml
│   └── build.gradle
├── settings.gradle
└── README.md"""

FOLDER_STRUCTURE_DEFAULT: Dict[str, str] = {
    "Python": _PYTHON_STRUCTURE,
    "JavaScript": _JAVASCRIPT_STRUCTURE,
    "Java": _JAVA_STRUCTURE,
    "C++": _CPP_STRUCTURE,
}

FOLDER_STRUCTURE: Dict[Tuple[str, str], str] = {
    ("AIML", "Python"): _AIML_PYTHON_STRUCTURE,
    ("Data Science", "Python"): _DATA_SCIENCE_PYTHON_STRUCTURE,
    ("Web Dev", "JavaScript"): _WEB_JAVASCRIPT_STRUCTURE,
    ("App Dev", "Java"): _ANDROID_JAVA_STRUCTURE,
}

# ================== FIXED LISTS ==================

ROADMAP: Tuple[str, ...] = (
    "Requirement Analysis & Planning",
    "Environment Setup & Installation",
    "Core Feature Implementation",
    "UI/UX Design & Integration",
    "Testing & Debugging",
    "Documentation & Deployment",
)

FUTURE_ENHANCEMENTS: Tuple[str, ...] = (
    "Mobile App Integration",
    "AI-powered Insights",
    "Cloud Deployment (AWS/Azure)",
)

# ================== DATASETS ==================

AIML_DATASETS: Tuple[Dict[str, str], ...] = (
    {"name": "Kaggle Datasets", "description": "Thousands of community datasets with notebooks and leaderboards."},
    {"name": "UCI Machine Learning Repository", "description": "Classic, well-documented datasets for benchmarking models."},
    {"name": "Google Dataset Search", "description": "Search engine indexing datasets published across the web."},
    {"name": "Hugging Face Datasets", "description": "Ready-to-load text, audio and vision datasets for deep learning."},
    {"name": "ImageNet", "description": "Large labelled image collection for computer vision models."},
)

AIML_DATASET_COUNT = 2

DATA_SCIENCE_DATASET: Dict[str, str] = {
    "name": "Our World in Data",
    "description": "Open, cleaned datasets on economics, health and climate for exploratory analysis.",
}


def titles_for(domain: str) -> List[str]:
    return list(TITLES.get(domain) or FALLBACK_TITLES)


def problems_for(domain: str) -> List[str]:
    return list(PROBLEMS.get(domain) or FALLBACK_PROBLEMS)
