# app.py
import argparse
import copy
import json
import os
import sys
from datetime import datetime

from flask import Flask, request, jsonify

from seo_score import ContentAnalyzer, get_score_color
from seo_score.content import analyze_keyword_placement, analyze_readability_details
from seo_score.content.keywords import format_percent
from seo_score.on_page import analyze_title, analyze_meta_description

DEFAULT_CONFIG = {
    "ContentAnalyzer": {
        "site_hostname": "",  # Hostname used to tell internal links from external ones
    },
    "Global": {"debug": False}
}


def merge_config(base, overrides):
    """Deep-merge `overrides` into a copy of `base`; nested sections are merged key by key."""
    merged = copy.deepcopy(base)
    for key, value in (overrides or {}).items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def load_config(path=None):
    current_config = copy.deepcopy(DEFAULT_CONFIG)
    if not path:
        return current_config
    try:
        with open(path, 'r') as f:
            custom_config = json.load(f)
        if not isinstance(custom_config, dict):
            print(f"Warning: Config file {path} must contain a JSON object. Using default settings.")
            return current_config
        print(f"Loaded custom configuration from {path}")
        return merge_config(current_config, custom_config)
    except FileNotFoundError:
        print(f"Warning: Config file {path} not found. Using default settings.")
    except json.JSONDecodeError:
        print(f"Warning: Error decoding JSON from {path}. Using default settings.")
    return current_config


# --- Flask App Setup ---
app = Flask(__name__)
# Loaded configuration for the Flask app; replaced by run_cli() when --config is given
flask_app_config = copy.deepcopy(DEFAULT_CONFIG)


class SEOContentScorer:
    def __init__(self, config=None, output_format="json"):
        self.config = config if config else copy.deepcopy(DEFAULT_CONFIG)
        self.output_format = output_format
        self.report = {}
        self.supplementary = {}

    def build_analyzer(self, site_hostname=None):
        content_cfg = dict(self.config.get("ContentAnalyzer", {}))
        if site_hostname is not None:
            content_cfg["site_hostname"] = site_hostname
        content_cfg["Global"] = self.config.get("Global", {})
        return ContentAnalyzer(config=content_cfg)

    def run_analysis(self, content, focus_keyword="", site_hostname=None, source=None,
                     title=None, meta_description=None, url=None):
        """
        Core analysis logic, callable by both CLI and API.
        site_hostname: overrides ContentAnalyzer.site_hostname from config for this call.
        source: label of where the content came from (file name, "api"), kept in the report.
        title, meta_description, url: optional page fields; their checks are reported
        next to the content score and never change it.
        """
        analyzer = self.build_analyzer(site_hostname)
        if analyzer.is_debug():
            print(f"Running {analyzer.get_module_name()} (site_hostname={analyzer.site_hostname!r})")
        result = analyzer.analyze(content, focus_keyword)

        self.report = {
            "analysis_timestamp": datetime.now().isoformat(),
            "source": source,
            "focus_keyword": focus_keyword or None,
            "site_hostname": analyzer.site_hostname or None,
            "color": get_score_color(result.score),
        }
        self.report.update(result.to_dict())

        self.supplementary = {"readabilityDetails": analyze_readability_details(content)}
        if title is not None:
            self.supplementary["title"] = analyze_title(title, focus_keyword)
        if meta_description is not None:
            self.supplementary["metaDescription"] = analyze_meta_description(meta_description, focus_keyword)
        if focus_keyword and isinstance(focus_keyword, str):
            self.supplementary["keywordPlacement"] = analyze_keyword_placement(content, focus_keyword, url or "")
        self.report.update({key: value.to_dict() for key, value in self.supplementary.items()})
        return result

    def render_text(self, result):
        lines = [
            f"Score: {result.score} ({result.grade}) {get_score_color(result.score)}",
            f"Words: {result.word_count}",
        ]
        if result.keyword:
            lines.append(f"Keyword density: {format_percent(result.keyword.density)}% ({result.keyword.occurrences} occurrences)")
        lines.append(f"Readability: {result.readability.flesch_score:.1f} ({result.readability.grade_level or 'n/a'})")
        lines.append("")
        lines.append("SEO Analysis")
        for issue in result.issues:
            lines.append(f"  {issue.icon} {issue.message}")

        extra_issues = [i for analysis in self.supplementary.values() for i in analysis.issues]
        if extra_issues:
            lines.append("")
            lines.append("Additional checks (not scored)")
            for issue in extra_issues:
                lines.append(f"  {issue.icon} {issue.message}")
        return "\n".join(lines)

    def save_report_to_file(self, name="content", filename_prefix="seo_score"):
        if not os.path.exists("reports"):
            os.makedirs("reports")
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        safe_name = os.path.splitext(os.path.basename(name))[0].replace(".", "_") or "content"
        filename = f"reports/{filename_prefix}_{safe_name}_{timestamp}.{self.output_format}"
        try:
            with open(filename, "w", encoding="utf-8") as f:
                if self.output_format == "json":
                    json.dump(self.report, f, indent=4, ensure_ascii=False)
                else:
                    f.write(str(self.report))
            print(f"Report saved to {filename}")
            return filename
        except IOError as e:
            print(f"Error saving report: {e}")
            return None


def read_content(path):
    if path == "-":
        return sys.stdin.read()
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ValueError(f"Could not read content from {path}: {e}") from e


# --- Flask Routes ---
@app.route('/health', methods=['GET'])
def health_endpoint():
    return jsonify({"status": "ok"})


@app.route('/analyze', methods=['POST'])
def analyze_endpoint():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON payload"}), 400

    content = data.get('content', '')
    focus_keyword = data.get('focus_keyword', data.get('keyword', ''))
    site_hostname = data.get('site_hostname')
    if site_hostname is not None and not isinstance(site_hostname, str):
        return jsonify({"error": "site_hostname must be a string"}), 400
    page_fields = {}
    for field_name in ("title", "meta_description", "url"):
        value = data.get(field_name)
        if value is not None and not isinstance(value, str):
            return jsonify({"error": f"{field_name} must be a string"}), 400
        page_fields[field_name] = value

    scorer = SEOContentScorer(config=copy.deepcopy(flask_app_config))
    try:
        scorer.run_analysis(content, focus_keyword, site_hostname=site_hostname, source="api", **page_fields)
        return jsonify(scorer.report)
    except Exception as e:
        return jsonify({"error": f"An unexpected error occurred: {str(e)}"}), 500


def run_cli(argv=None):
    parser = argparse.ArgumentParser(description="On-page SEO content scorer")
    parser.add_argument("file", nargs='?', default=None, help="HTML file to score, '-' for stdin (omit to run in API/server mode).")
    parser.add_argument("--keyword", type=str, default="", help="Focus keyword the content is optimized for.")
    parser.add_argument("--site-host", type=str, default=None, help="Hostname of the current site (overrides config).")
    parser.add_argument("--title", type=str, default=None, help="SEO title to check (reported, not scored).")
    parser.add_argument("--meta-description", type=str, default=None, help="Meta description to check (reported, not scored).")
    parser.add_argument("--url", type=str, default=None, help="Page URL, checked for the focus keyword.")
    parser.add_argument("--config", type=str, default=None, help="Path to a JSON config file.")
    parser.add_argument("--output", choices=["json", "txt"], default="txt", help="Output format for the report.")
    parser.add_argument("--save", action="store_true", help="Save the report under reports/.")
    parser.add_argument("--host", type=str, default="127.0.0.1", help="API server host.")
    parser.add_argument("--port", type=int, default=5000, help="API server port.")

    args = parser.parse_args(argv)

    global flask_app_config
    current_config = load_config(args.config)
    flask_app_config = copy.deepcopy(current_config)

    # If no file is provided, run in API/server mode. Otherwise, run in CLI mode.
    if not args.file:
        print(f"Starting Flask server on http://{args.host}:{args.port}/ (API mode)")
        app.run(host=args.host, port=args.port, debug=False)
        return 0

    try:
        content = read_content(args.file)
    except ValueError as ve:
        print(f"Error: {ve}")
        return 1

    scorer = SEOContentScorer(config=current_config, output_format=args.output)
    result = scorer.run_analysis(content, args.keyword, site_hostname=args.site_host, source=args.file,
                                 title=args.title, meta_description=args.meta_description, url=args.url)
    if args.output == "json":
        print(json.dumps(scorer.report, indent=2, ensure_ascii=False))
    else:
        print(scorer.render_text(result))

    if args.save:
        scorer.save_report_to_file(name="stdin" if args.file == "-" else args.file)
    return 0


if __name__ == "__main__":
    sys.exit(run_cli())
