"""
Example: inferring a TypeScript declaration from sample records.

Shows the two entry points:
- In-memory: infer_declaration(samples) returns the declaration text
- File-based: DeclarationOrchestrator reads a JSON array and writes a .d.ts file
"""

import json
import tempfile
from pathlib import Path

from typeshape import DeclarationOrchestrator, RenderOptions, infer_declaration

samples = [
    {"zipcode": 501},
    {"zipcode": "00601", "lat": 18.18, "lng": -66.75, "median_household_income": 12041},
    {"zipcode": "00602", "lat": 18.36, "lng": -67.18, "median_household_income": None},
]


# =============================================================================
# Example 1: In-memory inference
# =============================================================================
print(infer_declaration(samples))
# export type Data = {
# 	zipcode : number | string,
# 	lat? : number,
# 	lng? : number,
# 	median_household_income? : number | null
# };


# =============================================================================
# Example 2: Custom rendering
# =============================================================================
print(infer_declaration(samples, RenderOptions(type_name="Zipcode", indent="  ", property_separator=": ")))


# =============================================================================
# Example 3: File-based run
# =============================================================================
with tempfile.TemporaryDirectory() as tmp:
    input_path = Path(tmp) / "zipcodes.json"
    input_path.write_text(json.dumps(samples), encoding="utf-8")

    result = DeclarationOrchestrator(run_id="example-run").run(
        {"input_path": str(input_path), "output_path": str(Path(tmp) / "zipcodes.d.ts")}
    )
    print(f"Run {result['run_id']}: {result['sample_count']} samples -> {result['sink']['target_location']}")
