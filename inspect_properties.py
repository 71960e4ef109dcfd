# -*- coding: utf-8 -*-
import argparse
import sys

from kol_helper import context, properties, settings
from kol_helper.constants import PROPERTY_TYPES
from kol_helper.logging_service import setup_logging
from kol_helper.property_store import RedisPropertyStore
from kol_helper.redis_client import initialize_redis
from kol_helper.resources import source_terminal


def print_section_header(title):
    """打印一个美化的分段标题"""
    print("\n" + "="*60)
    print(f" {title.center(58)} ")
    print("="*60)


def main():
    parser = argparse.ArgumentParser(description="查看 Redis 中某个账户已记录的属性及由其推导出的 Source terminal 数值。")
    parser.add_argument("account_id", nargs="?", default=settings.ACCOUNT_ID, help="账户ID，默认读取配置中的 account_id")
    args = parser.parse_args()
    setup_logging()

    if not args.account_id:
        print("错误：未指定账户ID，且配置中没有 account_id。")
        sys.exit(1)

    print("[步骤 1/2] 正在连接到 Redis 数据库...")
    db = initialize_redis()
    if not db.is_connected:
        print("  - ❌ 错误: Redis 未启用或连接失败，请检查配置。")
        sys.exit(1)

    settings.set_account_id(args.account_id)
    store = RedisPropertyStore(db)
    context.set_store(store)

    print("[步骤 2/2] 正在读取并展示数据...")
    print_section_header(f"已记录属性 (账户: {args.account_id})")
    raw = store.get_all()
    if not raw:
        print("  - 未找到该账户的任何属性。")
    for key in sorted(PROPERTY_TYPES):
        # 在原始值两边加上引号，以便看清空字符串
        print(f"  - {key}: '{raw.get(key, '')}' -> {properties.get(key)!r}")

    print_section_header("Source terminal")
    print(f"  - 芯片: {', '.join(source_terminal.get_chips()) or '(无)'}")
    print(f"  - 当前技能: {', '.join(map(str, source_terminal.get_skills())) or '(无)'}")
    print(f"  - Digitize: {source_terminal.get_digitize_uses()}/{source_terminal.get_maximum_digitize_uses()}"
          f" (当前怪物: {source_terminal.get_digitize_monster() or '无'})")
    print(f"  - Enhance: {source_terminal.get_enhance_uses()}/{source_terminal.maximum_enhance_uses()}"
          f" (持续 {source_terminal.enhance_buff_duration()} 回合)")
    print(f"  - Enquiry 持续: {source_terminal.enquiry_buff_duration()} 回合")
    print(f"  - Portscan: {source_terminal.get_portscan_uses()}")


if __name__ == "__main__":
    main()
