"""Technique guide for the bodyweight exercises."""

from types import MappingProxyType
from typing import Mapping

from ..core.value_objects.plan_result import ExerciseGuide

SQUAT = "Agachamento Livre"
PUSH_UP = "Flexão de Braço (ou Joelhos)"
CRUNCH = "Abdominal Supra"
PLANK = "Prancha Isométrica"
LUNGE = "Afundo (Passada)"
BURPEE = "Burpees (Adaptado)"

EXERCISE_GUIDE: Mapping[str, ExerciseGuide] = MappingProxyType({
    SQUAT: ExerciseGuide(
        position="Pés afastados na largura dos ombros, pontas levemente para fora. Coluna reta e peito aberto.",
        execution="Flexione os joelhos e projete o quadril para trás, como se fosse sentar em uma cadeira invisível. Desça até onde conseguir manter a postura e suba empurrando o chão.",
        care="Mantenha os calcanhares firmes no chão o tempo todo. Olhe para frente.",
        common_mistakes="Deixar os joelhos caírem para dentro (valgo) ou curvar as costas.",
        breathing="Inspire ao descer, expire (solte o ar) ao subir.",
    ),
    PUSH_UP: ExerciseGuide(
        position="Mãos apoiadas no chão afastadas um pouco além dos ombros. Corpo em linha reta (prancha) ou joelhos apoiados no chão para facilitar.",
        execution="Desça o peito em direção ao chão flexionando os cotovelos. Empurre o chão para retornar à posição inicial.",
        care="Mantenha o abdômen contraído para não deixar o quadril cair.",
        common_mistakes="Cotovelos muito abertos (formando um T) - mantenha-os a 45 graus (formando uma seta).",
        breathing="Inspire ao descer, expire ao empurrar.",
    ),
    CRUNCH: ExerciseGuide(
        position="Deitado de costas, joelhos flexionados e pés apoiados no chão. Mãos nas têmporas ou cruzadas no peito.",
        execution="Eleve os ombros do chão contraindo o abdômen. O movimento é curto e focado na parte superior.",
        care="Imagine que segura uma maçã entre o queixo e o peito para não forçar o pescoço.",
        common_mistakes="Puxar a cabeça com as mãos ou tentar subir até sentar (não é necessário).",
        breathing="Solte todo o ar pela boca ao subir (contração), inspire ao descer.",
    ),
    PLANK: ExerciseGuide(
        position="Apoie os antebraços no chão, cotovelos alinhados abaixo dos ombros. Estenda as pernas apoiando a ponta dos pés.",
        execution="Mantenha o corpo estático, em linha reta da cabeça aos calcanhares. Contraia forte glúteos e abdômen.",
        care="Não prenda a respiração. Se sentir dor na lombar, apoie os joelhos.",
        common_mistakes="Quadril muito alto ou muito baixo (arquear a lombar).",
        breathing="Respiração fluida, constante e controlada.",
    ),
    LUNGE: ExerciseGuide(
        position="Em pé, pés na largura do quadril. Dê um passo largo para trás com uma das pernas.",
        execution="Flexione os dois joelhos até formarem ângulos de aprox. 90 graus. O joelho de trás aproxima-se do chão.",
        care="O tronco deve permanecer vertical, não incline para frente.",
        common_mistakes="O joelho da frente ultrapassar muito a ponta do pé ou o calcanhar da frente sair do chão.",
        breathing="Inspire ao descer, expire ao subir.",
    ),
    BURPEE: ExerciseGuide(
        position="Em pé, pés na largura dos ombros.",
        execution="Agache e apoie as mãos no chão. Leve os pés para trás (posição de prancha). Traga os pés de volta para perto das mãos. Fique em pé.",
        care="Faça o movimento de forma pausada e controlada, sem impacto.",
        common_mistakes="Curvar as costas ao apoiar as mãos no chão.",
        breathing="Mantenha um ritmo respiratório constante.",
    ),
})
