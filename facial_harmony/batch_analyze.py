"""배치 랜드마크 분석 스크립트"""

import argparse
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

from .config.constants import METRIC_NAMES
from .config.settings import WeightConfiguration
from .processing.session import AnalysisSession
from .utils.config_loader import Config
from .utils.exceptions import InvalidInputError
from .utils.json_exporter import export_results


def load_landmark_file(path: Path) -> Any:
    """
    랜드마크 JSON 파일 로드

    지원 형식:
        {"landmarks": [[x, y], ...]}
        {"landmarks": {"33": [x, y], ...}}
        [[x, y], ...]

    Raises:
        InvalidInputError: 파일을 읽을 수 없거나 JSON 형식이 잘못된 경우
    """
    try:
        with path.open('r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidInputError(f"Invalid JSON in {path.name}: {e}")
    except UnicodeDecodeError as e:
        raise InvalidInputError(f"{path.name} is not UTF-8 encoded: {e}")
    except OSError as e:
        raise InvalidInputError(f"Cannot read {path.name}: {e}")

    if isinstance(data, dict):
        if 'landmarks' not in data:
            raise InvalidInputError(f"{path.name} has no 'landmarks' key")
        return data['landmarks']
    return data


def parse_weight_overrides(values: Optional[Sequence[str]]) -> Dict[str, float]:
    """--weight NAME=VALUE 인자 파싱"""
    overrides = {}
    for item in values or []:
        name, sep, value = item.partition('=')
        if not sep:
            raise argparse.ArgumentTypeError(f"Weight must be NAME=VALUE, got '{item}'")
        try:
            overrides[name.strip()] = float(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"Weight value must be a number, got '{value}'")
    return overrides


def analyze_directory(
    directory: str,
    session: AnalysisSession,
    weights: Optional[WeightConfiguration] = None,
) -> List[Dict[str, Any]]:
    """
    디렉토리 내 모든 랜드마크 JSON 분석

    Args:
        directory: 랜드마크 파일 디렉토리
        session: 분석 세션
        weights: 가중치 (None이면 세션 가중치)

    Returns:
        분석 결과 리스트
    """
    landmark_files = sorted(Path(directory).glob('*.json'))

    print("=" * 80)
    print(f"배치 조화도 분석 - {len(landmark_files)}개 파일")
    print("=" * 80)
    print()

    items: List[Tuple[str, Any]] = []
    load_failures: List[Dict[str, Any]] = []
    for path in landmark_files:
        try:
            items.append((path.name, load_landmark_file(path)))
        except InvalidInputError as e:
            load_failures.append({'filename': path.name, 'success': False, 'error': str(e)})

    # 파일 이름 순서 유지
    results = sorted(session.analyze_batch(items, weights) + load_failures, key=lambda r: r['filename'])

    for result in results:
        if result['success']:
            analysis = result['analysis']
            print(f"   ✅ {result['filename']}: {analysis['overall']:.1f} ({analysis['description']})")
        else:
            print(f"   ❌ {result['filename']}: {result['error']}")
    print()

    return results


def print_summary(results: List[Dict[str, Any]]):
    """결과 요약 출력"""
    print("=" * 80)
    print("📊 분석 결과 요약")
    print("=" * 80)
    print()

    successful = [r for r in results if r.get('success', False)]
    failed = [r for r in results if not r.get('success', False)]

    print(f"✅ 성공: {len(successful)}개")
    print(f"❌ 실패: {len(failed)}개")
    print()

    if not successful:
        return

    overall = np.array([r['analysis']['overall'] for r in successful], dtype=np.float64)
    print(f"⭐ 평균 종합 점수: {overall.mean():.1f} (최저 {overall.min():.1f}, 최고 {overall.max():.1f})")
    print()

    print("📐 지표별 평균 점수:")
    for name in METRIC_NAMES:
        scores = np.array([r['analysis']['metrics'][name]['score'] for r in successful], dtype=np.float64)
        print(f"   - {name}: {scores.mean():.1f}")
    print()

    print("🎭 얼굴형 분포:")
    face_shapes: Dict[str, int] = {}
    for r in successful:
        shape = r['analysis']['face_shape'] or 'unknown'
        face_shapes[shape] = face_shapes.get(shape, 0) + 1
    for shape, count in sorted(face_shapes.items()):
        print(f"   - {shape.upper()}: {count}개")
    print()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """메인 함수"""
    parser = argparse.ArgumentParser(description='배치 얼굴 조화도 분석')
    parser.add_argument(
        '--directory',
        default='data/landmarks',
        help='랜드마크 JSON 디렉토리 (기본: data/landmarks)'
    )
    parser.add_argument(
        '--output',
        default='harmony_results.json',
        help='결과 저장 파일 (기본: harmony_results.json)'
    )
    parser.add_argument(
        '--config',
        default=None,
        help=('harmony 상수용 config.yaml 경로 (기본: 패키지 기본 설정). '
              '로깅 설정은 FACIAL_HARMONY_CONFIG_PATH 환경 변수의 파일을 따른다')
    )
    parser.add_argument(
        '--weight',
        action='append',
        metavar='NAME=VALUE',
        help='지표 가중치 (symmetry, proportion, fifths, eyeGap). 여러 번 지정 가능'
    )

    args = parser.parse_args(argv)

    config = Config(args.config) if args.config else None
    session = AnalysisSession(config=config)

    try:
        overrides = parse_weight_overrides(args.weight)
        weights = WeightConfiguration.from_mapping(overrides or None, base=session.weights)
    except (argparse.ArgumentTypeError, InvalidInputError) as e:
        parser.error(str(e))

    results = analyze_directory(args.directory, session, weights)
    print_summary(results)

    output_path = export_results(results, args.output)
    print(f"💾 결과 저장: {output_path}")
    print()

    return 0 if results and all(r['success'] for r in results) else 1


if __name__ == "__main__":
    raise SystemExit(main())
