"""Built-in word catalog."""

from .catalog import WordEntry, validate_catalog

WORDS = validate_catalog([
    WordEntry("가방", "생활", "학교 갈 때 메고 다녀요", "물건을 넣어 들거나 메고 다니는 용구."),
    WordEntry("바다", "자연", "짠물이 끝없이 펼쳐져 있어요", "지구 표면의 대부분을 차지하는 짠물의 넓은 공간."),
    WordEntry("하늘", "자연", "고개를 들면 보여요", "지평선 위로 펼쳐진 무한대의 넓은 공간."),
    WordEntry("은하수", "우주", "밤하늘을 가로지르는 빛의 강", "수많은 별들이 띠 모양으로 모여 강처럼 보이는 것."),
    WordEntry("도서관", "장소", "조용히 책을 읽는 곳", "책과 자료를 모아 두고 사람들이 볼 수 있게 한 시설."),
    WordEntry("컴퓨터", "기술", "키보드와 모니터가 있어요", "전자 회로로 자료를 처리하는 기계."),
    WordEntry("무지개", "자연", "비가 그친 뒤 일곱 빛깔", "공기 중의 물방울에 햇빛이 굴절되어 나타나는 반원 모양의 빛깔 띠."),
    WordEntry("사과", "음식", "빨갛고 아삭한 과일", "사과나무의 열매로 새콤달콤한 맛이 난다."),
    WordEntry("자전거", "교통", "두 바퀴와 페달", "사람이 페달을 밟아 바퀴를 굴려 가는 탈것."),
    WordEntry("눈사람", "겨울", "겨울 마당에 서 있는 친구", "눈을 뭉쳐 사람 모양으로 만든 것."),
    WordEntry("비행기", "교통", "하늘을 나는 탈것", "날개와 엔진으로 공중을 나는 항공기."),
    WordEntry("고양이", "동물", "야옹 하고 울어요", "사람과 가까이 지내는 작은 육식 동물."),
    WordEntry("강아지", "동물", "꼬리를 흔들며 반겨요", "개의 새끼 또는 작은 개를 친근하게 이르는 말."),
    WordEntry("신호등", "교통", "빨강, 노랑, 초록", "교차로에서 통행을 지시하는 등."),
    WordEntry("달빛", "자연", "밤에 은은하게 비춰요", "달에서 비치는 빛."),
    WordEntry("김치", "음식", "배추를 절여 만들어요", "소금에 절인 채소를 양념하여 발효시킨 음식."),
    WordEntry("떡볶이", "음식", "빨간 양념의 길거리 음식", "가래떡을 양념에 볶거나 끓인 음식."),
    WordEntry("운동장", "장소", "학교에서 뛰어노는 곳", "체육이나 놀이를 할 수 있게 마련한 넓은 마당."),
    WordEntry("우산", "생활", "비 오는 날 펼쳐요", "비를 가리기 위해 펴서 쓰는 물건."),
    WordEntry("해바라기", "식물", "해를 따라 고개를 돌려요", "키가 크고 노란 꽃이 피는 한해살이풀."),
    WordEntry("눈꽃", "겨울", "나뭇가지에 핀 하얀 꽃", "나뭇가지에 눈이 얼어붙어 꽃처럼 보이는 것."),
    WordEntry("시계", "생활", "째깍째깍", "시간을 재거나 나타내는 기계."),
    WordEntry("별빛", "우주", "밤하늘에서 반짝여요", "별에서 비치는 빛."),
    WordEntry("냉장고", "생활", "음식을 차갑게 보관해요", "식품을 낮은 온도로 보관하는 상자 모양의 기계."),
    WordEntry("피아노", "음악", "흰 건반과 검은 건반", "건반을 눌러 줄을 때려 소리를 내는 악기."),
    WordEntry("할머니", "가족", "아버지나 어머니의 어머니", "부모의 어머니를 이르는 말."),
    WordEntry("소나기", "날씨", "갑자기 쏟아졌다 그쳐요", "갑자기 세차게 쏟아지다가 곧 그치는 비."),
    WordEntry("봄바람", "계절", "따뜻한 계절에 부는 바람", "봄철에 불어오는 바람."),
    WordEntry("책상", "생활", "공부할 때 앞에 두어요", "앉아서 책을 읽거나 글을 쓸 때 쓰는 상."),
    WordEntry("블록체인", "기술", "분산 장부 기술", "거래 기록을 여러 컴퓨터에 나누어 저장하는 기술."),
])
