"""简体中文翻译表。"""

STRINGS: dict[str, str] = {
    # ── 异常 ──
    "exc.invalid_card": "{name}：{field} 必须为正数，实际为 {value}",
    "exc.invalid_composition": "组合牌的组成不能为空，且必须全部为同一种基础牌",
    "exc.game_state": "当前游戏状态不允许此操作",
    "exc.game_not_started": "游戏尚未开始，请先调用 start_game()",
    "exc.game_finished": "游戏已结束",
    "exc.invalid_replay": "该操作只能执行一次",
    "exc.game_already_started": "游戏已经开始，不能重复开局",
    "exc.config_error": "游戏配置错误",
    "exc.data_load_error": "牌组数据加载失败",
    # ── 对局结果 ──
    "game.over_win": "疾病被治愈，医生获胜！",
    "game.over_lose": "医生正气耗尽，疾病获胜！",
    "game.over_draw": "回合数已到，正邪相持，平局！",
    "game.in_progress": "对局进行中",
    "title.doctor_win": "悬壶济世",
    "title.disease_win": "更强大的病邪",
    "result.win": "胜利",
    "result.lose": "失败",
    "result.draw": "平局",
    "result.pending": "进行中",
    # ── 角色/流派 ──
    "role.doctor": "医生",
    "role.disease": "疾病",
    "school.classical_formula": "经方派",
    "school.warm_disease": "温病派",
    "school.golden_needle": "金针派",
    "school.earth_tonifying": "补土派",
    # ── 对战日志 ──
    "log.game_start": "======= 医战开始！=======",
    "log.player_intro": "{role}：{name}（{school}）",
    "log.turn_start": "—— 第 {turn} 回合 ——",
    "log.single_herb": "{name}使用【{card}】治疗，回复{heal}点正气，对疾病造成{damage}点伤害",
    "log.formula": "{name}以{herbs}合成方剂【{formula}】，治疗效果{effect}点",
    "log.acupoint": "{name}针刺【{card}】，对疾病造成{damage}点伤害",
    "log.symptom": "{name}发动【{card}】，对医生造成{damage}点伤害",
    "log.skip.empty_hand": "{name}手牌已空，本回合无法行动",
    "log.skip.not_herb": "{name}翻到【{card}】，不是药材，用药落空",
    "log.skip.not_enough_herbs": "{name}手中药材只有{count}味，无法合成方剂",
    "log.skip.no_acupoint": "{name}手中没有穴位牌，针刺落空",
    "log.skip.not_symptom": "{name}翻到【{card}】，未能发作",
    "log.doctor_title": "{name}医术精进，获得称号【{title}】",
    "log.disease_title": "{name}晋升为【{title}】！",
    # ── 六经辨证 ──
    "diag.new_game": "新的病人来了，请辨证施治",
    "diag.diagnose": "辨证：{symptom} → {channel}病",
    "diag.correct": "{formula}治疗{channel}病，方证相应，疗效{potency}点",
    "diag.wrong": "{formula}不适用于{channel}病，病情加重",
    "diag.transmit": "病邪传变：{old} → {new}",
    "diag.cured": "治愈成功！",
    "diag.failed": "治疗失败……",
    # ── 界面 ──
    "ui.title": "医战",
    "ui.wait_continue": "按回车键继续...",
    "ui.invalid_choice": "无效选择",
    "ui.cancel_hint": "输入 0 返回",
    "ui.menu.battle": "开始对战（医生 vs 疾病）",
    "ui.menu.diagnosis": "六经辨证",
    "ui.menu.rules": "游戏规则",
    "ui.menu.quit": "退出",
    "ui.menu.prompt": "请选择 [1-{count}]: ",
    "ui.menu.prompt_cancel": "请选择 [0-{count}]: ",
    "ui.school.title": "选择医生流派",
    "ui.school.hint.classical_formula": "用药与方剂疗效 ×2",
    "ui.school.hint.golden_needle": "用药与方剂疗效 ×3",
    "ui.school.hint.earth_tonifying": "用药与方剂疗效 ×2",
    "ui.turn_header": "第 {turn}/{max_turns} 回合",
    "ui.deck_count": "牌组剩余：{count}",
    "ui.hand.title": "{name} · 手牌 {count}",
    "ui.hand.name": "名称",
    "ui.hand.type": "种类",
    "ui.hand.detail": "属性",
    "ui.card.herb": "{property}·归{channel}经·药力{power}",
    "ui.card.acupoint": "{meridian}·针力{power}",
    "ui.card.symptom": "{type}·伤害{damage}",
    "ui.case.title": "医案",
    "ui.case.none": "尚未接诊",
    "ui.case.tongue": "舌象：{tongue}",
    "ui.case.pulse": "脉象：{pulse}",
    "ui.case.symptoms": "主症：{symptoms}",
    "ui.log_title": "对战记录",
    "ui.honor_title": "获得称号：【{title}】",
    "ui.summary.title": "对局统计",
    "ui.summary.turns": "总回合数",
    "ui.summary.result": "结果",
    "ui.summary.doctor_health": "医生正气",
    "ui.summary.disease_health": "疾病邪气",
    "ui.summary.doctor_hand": "医生剩余手牌",
    "ui.summary.disease_hand": "疾病剩余手牌",
    "ui.diag.channel": "当前病位：{channel}病",
    "ui.diag.turn": "第{turn}回合",
    "ui.diag.choose_symptom": "选择患者的症状",
    "ui.diag.choose_formula": "选择方剂",
    # ── main.py ──
    "main.description": "医战：医生与疾病的卡牌对战",
    "main.arg.seed": "随机种子，设置后对局可复现",
    "main.arg.auto": "直接开始一局自动对战，不显示菜单",
    "main.arg.delay": "自动对战的回合间隔（秒）",
    "main.arg.school": "医生流派",
    "main.arg.lang": "界面语言",
    "main.arg.log_level": "日志级别",
    "main.arg.debug": "调试模式（DEBUG 日志并输出到控制台）",
    "main.doctor_name": "张仲景",
    "main.disease_name": "温邪",
    "main.farewell": "\n感谢游玩医战！再见！",
    "main.interrupted": "\n\n游戏被中断，再见！",
    "main.error": "\n发生错误: {error}",
}
