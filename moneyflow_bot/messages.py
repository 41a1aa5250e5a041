"""User-facing texts for the 7-Day Money Flow Reset bot (Khmer)."""

SUPPORT_CONTACT = "@Chendasum"
COURSE_NAME = "7-Day Money Flow Reset™"
PRICE_USD = 24
REGULAR_PRICE_USD = 47

WELCOME_MESSAGE = (
    f"🎉 ស្វាគមន៍មកកាន់ {COURSE_NAME}!\n\n"
    "💡 ក្នុងរយៈពេល ៧ ថ្ងៃ អ្នកនឹងរៀនស្វែងរកលុយដែលលេចធ្លាយ "
    "និងបង្កើតប្រព័ន្ធគ្រប់គ្រងលុយដែលពិតជាដំណើរការ។\n\n"
    "🎯 ចាប់ផ្តើម:\n"
    "• /pricing - មើលតម្លៃ\n"
    "• /help - ជំនួយ\n\n"
    f"📞 ត្រូវការជំនួយ? ទាក់ទងមក {SUPPORT_CONTACT}"
)

PRICING_MESSAGE = f"""🎯 {COURSE_NAME} - កម្មវិធីសាមញ្ញ

💰 តម្លៃពិសេស: ${PRICE_USD} USD (ធម្មតា ${REGULAR_PRICE_USD})
🔥 សន្សំ: ${REGULAR_PRICE_USD - PRICE_USD} (បញ្ចុះ ៥០%!)

📚 អ្វីដែលអ្នកនឹងទទួលបាន:
✅ ៧ ថ្ងៃ នៃការសិក្សាហិរញ្ញវត្ថុពេញលេញ
✅ ការរកកន្លែងលុយលេចធ្លាយ (Money Leaks)
✅ ប្រព័ន្ធគ្រប់គ្រងលុយដែលពិតជាដំណើរការ
✅ ការតាមដានការរីកចម្រើន
✅ ការគាំទ្រ 24/7

💳 វិធីទូទាត់:
🏦 ABA Bank: 001 234 567
🏦 ACLEDA: 1234-567-890
📱 Wing: 012 345 678

ឬទំនាក់ទំនង {SUPPORT_CONTACT} សម្រាប់ជំនួយ

⚡ ចុះឈ្មោះឥឡូវ: សរសេរ "ខ្ញុំចង់ចូលរួម\""""

HELP_MESSAGE = f"""📞 ជំនួយ - {COURSE_NAME}

🎯 ការប្រើប្រាស់មូលដ្ឋាន:
• /start - ចាប់ផ្តើម
• /pricing - មើលតម្លៃ
• /help - ជំនួយ

📚 សម្រាប់សិស្សដែលបានចូលរួម:
• /day1 - /day7 - មេរៀនប្រចាំថ្ងៃ
• /progress - មើលការរីកចម្រើន

📞 ការគាំទ្រ:
• {SUPPORT_CONTACT} - ការគាំទ្រផ្ទាល់
• ការឆ្លើយតប: 24/7

💰 ការចូលរួម: ${PRICE_USD} USD (បញ្ចុះ ៥០%!)

🚀 ចាប់ផ្តើម: /pricing"""

GENERIC_ERROR = "សូមអភ័យទោស! មានបញ្ហាបច្ចេកទេស។ សូមព្យាយាមម្តងទៀត។"

PROGRESS_LOCKED = (
    "🔒 សម្រាប់សិស្សដែលបានចូលរួមប៉ុណ្ណោះ\n\n"
    "🎯 ប្រើ /pricing ដើម្បីចូលរួម"
)

NO_PROGRESS_YET = "📊 អ្នកមិនទាន់ចាប់ផ្តើមមេរៀនណាមួយនៅឡើយទេ។\n\n🚀 ចាប់ផ្តើម: /day1"

KHMER_DIGITS = str.maketrans("0123456789", "០១២៣៤៥៦៧៨៩")


def khmer_number(value: int) -> str:
    return str(value).translate(KHMER_DIGITS)


def paywall_message(day: int) -> str:
    return (
        "🔒 សម្រាប់សិស្សដែលបានចូលរួមប៉ុណ្ណោះ\n\n"
        f"ដើម្បីចូលប្រើមេរៀនថ្ងៃទី{day} អ្នកត្រូវចូលរួមកម្មវិធីសិន។\n\n"
        f"💰 តម្លៃ: ${PRICE_USD} USD (បញ្ចុះ ៥០%!)\n"
        "🎯 ប្រើ /pricing ដើម្បីចូលរួម"
    )


def part_indicator(index: int, total: int) -> str:
    """Footer appended to each part of a multi-part message (1-indexed)."""
    return f"📄 ផ្នែកទី {index}/{total}"


def chunk_failure_message(index: int) -> str:
    return f"សូមអភ័យទោស! មានបញ្ហាក្នុងការផ្ញើមេសេជផ្នែកទី {index}។ សូមសាកល្បងម្តងទៀត។"


def progress_message(completed_days: set[int], current_day: int, max_day: int) -> str:
    lines = [f"📊 ការរីកចម្រើនរបស់អ្នក - {COURSE_NAME}", ""]
    for day in range(1, max_day + 1):
        mark = "✅" if day in completed_days else "⬜"
        lines.append(f"{mark} ថ្ងៃទី {khmer_number(day)}")

    lines.append("")
    lines.append(
        f"🎯 បានបញ្ចប់: {khmer_number(len(completed_days))}/{khmer_number(max_day)} ថ្ងៃ"
    )
    if current_day < max_day:
        lines.append(f"🚀 មេរៀនបន្ទាប់: /day{current_day + 1}")
    else:
        lines.append("🏆 អបអរសាទរ! អ្នកបានបញ្ចប់កម្មវិធីទាំងមូល!")

    return "\n".join(lines)
