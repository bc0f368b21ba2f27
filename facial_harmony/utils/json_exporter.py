"""
분석 결과를 JSON으로 변환/저장
"""
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Union


def to_json_dict(result, source: str = "") -> Dict[str, Any]:
    """
    OverallResult를 JSON 직렬화 가능한 딕셔너리로 변환

    Args:
        result: OverallResult
        source: 원본 이미지/랜드마크 파일 경로 (선택)

    Returns:
        dict: 점수는 소수점 2자리, 원시 측정값은 4자리로 반올림
    """
    data = result.to_dict()
    data['source'] = source
    data['timestamp'] = datetime.now().isoformat(timespec='seconds')
    return data


def export_results(results: List[Dict[str, Any]], output_path: Union[str, Path]) -> Path:
    """결과 리스트를 JSON 파일로 저장"""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open('w', encoding='utf-8') as f:
        json.dump(results, f, indent=2, ensure_ascii=False)
    return output_path
