# FILE: backend/services/template_service.py
"""
Starter code stubs shown next to a generated idea.

Stubs are looked up by (domain, language). Each entry is a list of
(filename, language tag, body, min skill level); AIML bodies carry a {model}
placeholder filled with the selected model name.
"""
from typing import Dict, List, Optional, Tuple

from backend.schemas.generate import CodeTemplate

SKILL_ORDER = {"Beginner": 0, "Intermediate": 1, "Advanced": 2}

# ================== AIML ==================

_AIML_PY_PREPROCESS = '''import pandas as pd
from sklearn.model_selection import train_test_split


def load_and_split(path: str, target: str):
    df = pd.read_csv(path).dropna()
    X = df.drop(columns=[target])
    y = df[target]
    return train_test_split(X, y, test_size=0.2, random_state=42)
'''

_AIML_PY_TRAIN = '''# Model: {model}
import joblib
from preprocess import load_and_split

X_train, X_test, y_train, y_test = load_and_split("data/raw/dataset.csv", target="label")

# build_model() should return a configured {model} estimator
model = build_model()  # {model}
model.fit(X_train, y_train)

print("Validation score:", model.score(X_test, y_test))
joblib.dump(model, "models/model.pkl")
'''

_AIML_PY_SERVE = '''from fastapi import FastAPI
import joblib

app = FastAPI(title="{model} inference API")
model = joblib.load("models/model.pkl")


@app.post("/predict")
def predict(features: list[float]):
    return {{"prediction": model.predict([features]).tolist()[0]}}
'''

_AIML_JS_PREDICT = '''// Model: {model}
import * as tf from "@tensorflow/tfjs-node";

export async function predict(input) {{
  const model = await tf.loadLayersModel("file://./model/model.json");
  return model.predict(tf.tensor2d([input])).dataSync();
}}
'''

_AIML_JAVA_TRAIN = '''// Model: {model}
public class Trainer {{
    public static void main(String[] args) throws Exception {{
        // Load the dataset and train a {model} model here
        System.out.println("Training {model}...");
    }}
}}
'''

_AIML_CPP_INFER = '''// Model: {model}
#include <iostream>
#include <opencv2/opencv.hpp>

int main(int argc, char** argv) {{
    cv::Mat image = cv::imread(argv[1]);
    std::cout << "Running {model} on " << image.size() << std::endl;
    return 0;
}}
'''

# ================== WEB DEV ==================

_WEB_JS_SERVER = '''const express = require("express");
const app = express();

app.use(express.json());

app.get("/api/health", (req, res) => res.json({ status: "ok" }));

app.listen(5000, () => console.log("Server running on port 5000"));
'''

_WEB_JS_APP = '''import { useEffect, useState } from "react";

export default function App() {
  const [status, setStatus] = useState("loading");

  useEffect(() => {
    fetch("/api/health").then((r) => r.json()).then((d) => setStatus(d.status));
  }, []);

  return <h1>Server status: {status}</h1>;
}
'''

_WEB_PY_APP = '''from fastapi import FastAPI

app = FastAPI()


@app.get("/api/health")
def health():
    return {"status": "ok"}
'''

_WEB_JAVA_CONTROLLER = '''@RestController
@RequestMapping("/api")
public class HealthController {
    @GetMapping("/health")
    public Map<String, String> health() {
        return Map.of("status", "ok");
    }
}
'''

# ================== DATA SCIENCE ==================

_DS_PY_ANALYSIS = '''import pandas as pd
import matplotlib.pyplot as plt

df = pd.read_csv("data/dataset.csv")
print(df.describe())

df.hist(figsize=(10, 8))
plt.tight_layout()
plt.savefig("reports/figures/distributions.png")
'''

# ================== CYBER SECURITY ==================

_SEC_PY_SCANNER = '''from scapy.all import sniff


def handle(packet):
    if packet.haslayer("IP"):
        print(packet["IP"].src, "->", packet["IP"].dst)


sniff(prn=handle, count=50)
'''

_SEC_PY_PASSWORD = '''import re


def strength(password: str) -> int:
    checks = [r".{8,}", r"[A-Z]", r"[a-z]", r"\\d", r"[^\\w]"]
    return sum(bool(re.search(c, password)) for c in checks)
'''

_SEC_CPP_SNIFFER = '''#include <pcap.h>
#include <iostream>

void handler(u_char*, const struct pcap_pkthdr* header, const u_char*) {
    std::cout << "Captured packet of length " << header->len << std::endl;
}

int main() {
    char err[PCAP_ERRBUF_SIZE];
    pcap_t* handle = pcap_open_live("eth0", BUFSIZ, 1, 1000, err);
    pcap_loop(handle, 10, handler, nullptr);
    pcap_close(handle);
}
'''

# ================== APP DEV ==================

_APP_JAVA_ACTIVITY = '''public class MainActivity extends AppCompatActivity {
    @Override
    protected void onCreate(Bundle savedInstanceState) {
        super.onCreate(savedInstanceState);
        setContentView(R.layout.activity_main);
    }
}
'''

_APP_JS_SCREEN = '''import { Text, View } from "react-native";

export default function App() {
  return (
    <View>
      <Text>Hello from your new app</Text>
    </View>
  );
}
'''

# ================== GENERIC ==================

GENERIC_TEMPLATES: Dict[str, Tuple[str, str, str]] = {
    "Python": ("main.py", "python", 'def main():\n    print("Hello, project!")\n\n\nif __name__ == "__main__":\n    main()\n'),
    "JavaScript": ("index.js", "javascript", 'console.log("Hello, project!");\n'),
    "Java": ("Main.java", "java", 'public class Main {\n    public static void main(String[] args) {\n        System.out.println("Hello, project!");\n    }\n}\n'),
    "C++": ("main.cpp", "cpp", '#include <iostream>\n\nint main() {\n    std::cout << "Hello, project!" << std::endl;\n    return 0;\n}\n'),
}

# (filename, language tag, body, min skill level)
TemplateEntry = Tuple[str, str, str, str]

TEMPLATES: Dict[Tuple[str, str], List[TemplateEntry]] = {
    ("AIML", "Python"): [
        ("preprocess.py", "python", _AIML_PY_PREPROCESS, "Beginner"),
        ("train.py", "python", _AIML_PY_TRAIN, "Beginner"),
        ("serve.py", "python", _AIML_PY_SERVE, "Advanced"),
    ],
    ("AIML", "JavaScript"): [("predict.js", "javascript", _AIML_JS_PREDICT, "Beginner")],
    ("AIML", "Java"): [("Trainer.java", "java", _AIML_JAVA_TRAIN, "Beginner")],
    ("AIML", "C++"): [("infer.cpp", "cpp", _AIML_CPP_INFER, "Beginner")],
    ("Web Dev", "JavaScript"): [
        ("server.js", "javascript", _WEB_JS_SERVER, "Beginner"),
        ("App.jsx", "jsx", _WEB_JS_APP, "Intermediate"),
    ],
    ("Web Dev", "Python"): [("app.py", "python", _WEB_PY_APP, "Beginner")],
    ("Web Dev", "Java"): [("HealthController.java", "java", _WEB_JAVA_CONTROLLER, "Beginner")],
    ("Data Science", "Python"): [("analysis.py", "python", _DS_PY_ANALYSIS, "Beginner")],
    ("Cyber Security", "Python"): [
        ("password_check.py", "python", _SEC_PY_PASSWORD, "Beginner"),
        ("scanner.py", "python", _SEC_PY_SCANNER, "Intermediate"),
    ],
    ("Cyber Security", "C++"): [("sniffer.cpp", "cpp", _SEC_CPP_SNIFFER, "Beginner")],
    ("App Dev", "Java"): [("MainActivity.java", "java", _APP_JAVA_ACTIVITY, "Beginner")],
    ("App Dev", "JavaScript"): [("App.js", "javascript", _APP_JS_SCREEN, "Beginner")],
}


def select_templates(
    domain: str,
    language: str,
    skill_level: str,
    model_name: Optional[str] = None,
) -> List[CodeTemplate]:
    entries = TEMPLATES.get((domain, language))
    if entries is None:
        generic = GENERIC_TEMPLATES.get(language)
        if not generic:
            return []
        filename, tag, body = generic
        return [CodeTemplate(filename=filename, language=tag, content=body)]

    level = SKILL_ORDER.get(skill_level, 0)
    out: List[CodeTemplate] = []
    for filename, tag, body, min_level in entries:
        if SKILL_ORDER[min_level] > level:
            continue
        if domain == "AIML":
            body = body.format(model=model_name or "baseline")
        out.append(CodeTemplate(filename=filename, language=tag, content=body))
    return out
